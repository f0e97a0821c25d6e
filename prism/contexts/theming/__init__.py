"""
Theming Context

Responsibilities:
- Color math (hex/RGB/HSL conversion, WCAG contrast, RGB distance)
- Generates ranked color palettes from industry and personality
- Maintains the curated font-pairing catalog and builds font configurations
- Derives palettes and fonts from brand kits
- Builds, customizes and validates complete resume themes
- Serves the predefined theme templates

Owns: Theme values and every rule used to construct or validate them
Never: Writes files or formats HTML (delegates output to the rendering context)
"""
