"""
erp_console.inventory

Inventory frontend package.

Responsibilities:
- Category model returned by the backend.
- Category draft schema/validation and the create/edit form controller.
"""

# Package marker.
