"""
Endpoint subpackage.

Each module in this package defines an APIRouter for one group of
routes.  The routers are aggregated per service in ``router.py`` at
the package level and then included in the matching application.
"""
