"""
Trail Flyby

GPS track statistics and flyby camera-path generation for walk posts.
"""

__version__ = "0.1.0"
