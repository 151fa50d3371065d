from investor_intake.notification.base import BaseDrafter
from investor_intake.notification.drafter import NotificationDrafter
from investor_intake.notification.models import NotificationDraft

__all__ = ["BaseDrafter", "NotificationDraft", "NotificationDrafter"]
