"""
Use Cases

Use cases are organized into domain folders:
- auth/: Authentication and password reset flows
- inventory/: Inventory item maintenance
- requests/: Item request submission and review

Import from subdirectories for better organization.
"""
