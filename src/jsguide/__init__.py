"""jsguide - Advanced JavaScript Concepts article and renderer.

The article is authored as immutable structured content and rendered to
HTML or Markdown through Jinja2 templates.

Core principles:
- Immutability: content is built once at import time and never mutated
- Reproducibility: same article always renders to byte-identical output
- Fidelity: code samples are reproduced exactly as authored
"""

__version__ = "0.1.0"
__author__ = "jsguide Contributors"
