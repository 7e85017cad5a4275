"""
erp_console.api_clients

Backend API client package.

Responsibilities:
- Provide client interfaces for calling the business-suite REST backend.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Components depend on this boundary (not on httpx or URL layout directly).
