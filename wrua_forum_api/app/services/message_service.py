"""
Service layer for contact-form messages.

Messages are created by the public contact form and afterwards only
change through ``mark_read``.  Delivering them by email is out of
scope; administrators read them in the panel.
"""

from __future__ import annotations

from ..schemas.contact import ContactMessageRead
from .base import ResourceService


class MessageService(ResourceService[ContactMessageRead]):
    table = "contact_messages"
    columns = ("name", "email", "organization", "subject", "message", "read")
    bool_columns = ("read",)
    nullable_columns = ("organization",)
    read_model = ContactMessageRead
    label = "contact message"

    async def mark_read(self, message_id: str) -> bool:
        """Set ``read`` on a message.

        Idempotent: a message that is already read stays read.  Returns
        ``False`` when the id does not exist.
        """
        affected = self._write(f"UPDATE {self.table} SET read = 1 WHERE id = ?", (message_id,))
        if affected:
            self.logger.info("Marked contact message %s as read", message_id)
        return affected > 0
