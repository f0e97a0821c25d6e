"""
Rendering Context

Responsibilities:
- Emits theme CSS custom properties and full light/dark stylesheets
- Wraps resume HTML fragments in a themed document shell
- Resolves light/dark/auto mode and converts palettes between modes
- Saves and loads theme JSON/CSS files

Owns: CSS and HTML output, mode resolution, theme file persistence
Never: Decides palette or font choices (consumes finished themes)
"""
