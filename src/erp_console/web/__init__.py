"""
erp_console.web

Web package for the ERP console.

Responsibilities:
- FastAPI app factory and router modules.
- Per-request wiring of the session gate and inventory client.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# The web layer stays thin: build per-request components, drive them, shape JSON.
