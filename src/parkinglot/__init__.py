"""Line-oriented command interpreter for a fixed-capacity parking lot."""

__version__ = "1.0.0"
