"""
PRISM - Palette and Resume Interface Styling Machinery

Theme generation engine for the resume rendering pipeline. Derives accessible,
industry-appropriate color palettes and font configurations, composes them into
complete themes, and renders those themes as CSS and themed HTML documents.

Architecture:
- Theming Context: Color science, palette generation, font pairing, brand kits,
  theme construction and validation
- Rendering Context: CSS emission, HTML document shell, light/dark mode handling,
  theme file persistence
"""

__version__ = "0.1.0"
