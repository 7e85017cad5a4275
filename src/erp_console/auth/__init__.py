"""
erp_console.auth

Client-side identity package.

Responsibilities:
- Identity models (`User`, `IdentitySnapshot`).
- The reactive identity store.
- The session gate guarding protected views.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Nothing here verifies credentials; the backend owns authentication. This
# package only decides what the client renders from the identity it holds.
