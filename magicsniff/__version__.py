"""Version information for magicsniff"""

__version__ = "1.0.0"
__author__ = "Marc Rivero López"
__author_email__ = "mriverolopez@gmail.com"
__license__ = "GPL-3.0"
