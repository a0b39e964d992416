# models/views.py

"""
View models handed from the renderers to the templates.

Every text field holds raw device text. Escaping happens when a template
renders them (autoescape is forced on in create_app), never here.
"""

from dataclasses import dataclass
from typing import Optional, Tuple, Union

# placeholder kinds
NO_RESULTS   = "no_results"
LOAD_FAILED  = "load_failed"
NO_IMAGES    = "no_images"
NO_PORTS     = "no_ports"


@dataclass(frozen=True)
class Placeholder:
    """Informational entry shown instead of an empty list."""
    kind:    str
    message: str

    is_placeholder = True


# ── List ────────────────────────────────────────────────────────────────
@dataclass(frozen=True)
class ListRow:
    id:        str
    name:      str
    meta:      str
    is_active: bool = False

    is_placeholder = False


@dataclass(frozen=True)
class ListView:
    query: str
    rows:  Tuple[Union[ListRow, Placeholder], ...]

    @property
    def device_rows(self) -> Tuple[ListRow, ...]:
        return tuple(r for r in self.rows if not r.is_placeholder)

    @property
    def active_row(self) -> Optional[ListRow]:
        return next((r for r in self.device_rows if r.is_active), None)


# ── Detail ──────────────────────────────────────────────────────────────
@dataclass(frozen=True)
class DetailHeader:
    name:    str
    meta:    str
    summary: Optional[str] = None


@dataclass(frozen=True)
class Figure:
    src:     Optional[str]
    caption: str

    is_placeholder = False


@dataclass(frozen=True)
class PortEntry:
    label:  str
    meta:   str
    script: Optional[str] = None

    is_placeholder = False


@dataclass(frozen=True)
class DetailView:
    device_id: str
    header:    DetailHeader
    images:    Tuple[Union[Figure, Placeholder], ...]
    ports:     Tuple[Union[PortEntry, Placeholder], ...]
