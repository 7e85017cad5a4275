"""
erp_console.web.routers

Router modules for the console web layer.
"""

# Package marker.
