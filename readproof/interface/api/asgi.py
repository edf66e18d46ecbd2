"""ASGI entrypoint.

Logfire must be configured before this module is imported; start_app.py
handles this.
"""

from readproof.interface.api.app import create_app

app = create_app()
