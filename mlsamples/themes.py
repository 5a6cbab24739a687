import plotly.io as pio

THEMES = {
    "Simple White": "simple_white",
    "Plotly (Light)": "plotly",
    "Plotly (Dark)": "plotly_dark",
    "Presentation": "presentation",
}
DEFAULT_THEME = "Simple White"

def set_theme(name: str = DEFAULT_THEME):
    tmpl = THEMES.get(name, THEMES[DEFAULT_THEME])
    pio.templates.default = tmpl
    return tmpl
