"""
Feature modules for Trail Flyby.

Each feature is a self-contained module with:
- models.py / schemas.py - Data classes and Pydantic schemas
- service.py - Orchestration
- algorithm modules (parser, summary, playback, camera, export)
"""
