"""Observers get notified about the steps of the navigation process"""

from .abstract import NavigationObserver
from .simple_observer import SimpleObserver, AttemptedRoute
