"""Static template tables, keyed by table name."""

from uber_scaffold.models import TemplateTable
from uber_scaffold.templates.next_frontend import UBER_FRONTEND
from uber_scaffold.templates.react_mapbox import UBER_CLONE_APP

TEMPLATE_TABLES: dict[str, TemplateTable] = {
    UBER_CLONE_APP.name: UBER_CLONE_APP,
    UBER_FRONTEND.name: UBER_FRONTEND,
}

__all__ = [
    "TEMPLATE_TABLES",
    "UBER_CLONE_APP",
    "UBER_FRONTEND",
]
