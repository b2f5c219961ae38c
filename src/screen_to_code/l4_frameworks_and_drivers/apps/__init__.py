"""App subclasses — ComposerApp."""

from screen_to_code.l4_frameworks_and_drivers.apps.composer import ComposerApp

__all__ = ['ComposerApp']
