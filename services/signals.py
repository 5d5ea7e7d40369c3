"""
Service Signals

Services announce which read views a committed write made stale. Any
caching layer can subscribe; see services/views.py.
"""

from blinker import Namespace

_signals = Namespace()

#: Sent after a successful commit with ``views=`` the stale view keys.
views_invalidated = _signals.signal('views-invalidated')


def invalidate_views(sender, *views):
    """Mark views as stale. Runs receivers synchronously."""
    views_invalidated.send(sender, views=views)
