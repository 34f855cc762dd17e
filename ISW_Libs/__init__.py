"""
ISW_Libs - Image Square Wizard Library Modules

This package contains core functionality for the image-square-wizard tool,
organized into specialized sub-packages:

- ColorLib: Color models, color specification parsing and dominant color detection
- CanvasLib: Background resolution, square canvas layout and the Pillow-backed toolkit
"""

__version__ = "0.1.0"
