"""
The CONTROLLER layer drives the drawing: it turns model layouts into pixels
and schedules the animation on the Qt event loop.
"""
