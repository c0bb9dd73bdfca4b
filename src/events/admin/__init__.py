"""Events admin module.

Django autodiscover imports this module, which registers the admin classes
through the @admin.register decorators in the submodules.
"""

from events.admin.event import EventAdmin
from events.admin.registration import RegistrationAdmin, TicketAdmin

__all__ = ["EventAdmin", "RegistrationAdmin", "TicketAdmin"]
