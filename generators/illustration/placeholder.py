import base64

PLACEHOLDER_SIZE = 1024

_SVG_TEMPLATE = """<svg xmlns='http://www.w3.org/2000/svg' width='{size}' height='{size}'>
  <rect width='100%' height='100%' fill='#eceff1'/>
  <foreignObject x='40' y='40' width='{inner}' height='{inner}'>
    <div xmlns='http://www.w3.org/1999/xhtml' style='font-family: system-ui, sans-serif; font-size: 40px; color:#263238'>
      {text}
    </div>
  </foreignObject>
</svg>"""


def escape_markup(text: str) -> str:
    return text.replace("<", "&lt;").replace(">", "&gt;")


def generate_placeholder(text: str) -> str:
    """Renders `text` into a 1024x1024 SVG and returns it as a base64 data URI."""
    svg = _SVG_TEMPLATE.format(
        size=PLACEHOLDER_SIZE,
        inner=PLACEHOLDER_SIZE - 80,
        text=escape_markup(text),
    )
    payload = base64.b64encode(svg.encode("utf-8")).decode("ascii")
    return f"data:image/svg+xml;base64,{payload}"
