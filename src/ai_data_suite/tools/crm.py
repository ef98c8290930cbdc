"""CRM tools: contacts, interactions and follow-up tasks."""

from typing import Any, Dict

from ..models import Contact, FollowUp, Interaction, utcnow
from ..stores import EntityStores
from ..validation import parse_due_date
from . import ToolHandler, not_found

# Contact fields update_contact may overwrite
UPDATABLE_CONTACT_FIELDS = ("name", "email", "phone", "company")


class CreateContactTool(ToolHandler):
    def __init__(self, stores: EntityStores):
        super().__init__("create_contact", stores)

    def run_tool(self, arguments: dict) -> Dict[str, Any]:
        contacts = self.stores.contacts
        now = utcnow()
        contact = contacts.add(Contact(
            id=contacts.new_id(),
            name=arguments["name"],
            email=arguments["email"],
            phone=arguments.get("phone") or "",
            company=arguments.get("company") or "",
            role=arguments.get("role") or "",
            lastInteraction=now,
            createdAt=now,
        ))
        return {"success": True, "contact": contact.to_dict()}


class UpdateContactTool(ToolHandler):
    """Partial update: only fields present in the arguments are overwritten."""

    def __init__(self, stores: EntityStores):
        super().__init__("update_contact", stores)

    def run_tool(self, arguments: dict) -> Dict[str, Any]:
        contact = self.stores.contacts.get(arguments.get("contactId"))
        if not contact:
            return not_found("Contact")

        for field_name in UPDATABLE_CONTACT_FIELDS:
            if arguments.get(field_name) is not None:
                setattr(contact, field_name, arguments[field_name])

        return {"success": True, "contact": contact.to_dict()}


class ListContactsTool(ToolHandler):
    def __init__(self, stores: EntityStores):
        super().__init__("list_contacts", stores)

    def run_tool(self, arguments: dict) -> Dict[str, Any]:
        contacts = self.stores.contacts.values()

        company = arguments.get("company")
        if company:
            contacts = [c for c in contacts if c.company == company]

        tag = arguments.get("tag")
        if tag:
            contacts = [c for c in contacts if tag in c.tags]

        return {"success": True, "contacts": [c.to_dict() for c in contacts]}


class SearchContactsTool(ToolHandler):
    def __init__(self, stores: EntityStores):
        super().__init__("search_contacts", stores)

    def run_tool(self, arguments: dict) -> Dict[str, Any]:
        query = arguments["query"]
        results = [c.to_dict() for c in self.stores.contacts if c.matches(query)]
        return {"success": True, "contacts": results}


class LogInteractionTool(ToolHandler):
    """Append an interaction and stamp the contact's lastInteraction."""

    def __init__(self, stores: EntityStores):
        super().__init__("log_interaction", stores)

    def run_tool(self, arguments: dict) -> Dict[str, Any]:
        contact = self.stores.contacts.get(arguments.get("contactId"))
        if not contact:
            return not_found("Contact")

        interactions = self.stores.interactions
        now = utcnow()
        interaction = interactions.add(Interaction(
            id=interactions.new_id(),
            contactId=contact.id,
            type=arguments["type"],
            description=arguments["description"],
            date=now,
        ))
        contact.touch(now)

        return {"success": True, "interaction": interaction.to_dict()}


class CreateFollowUpTool(ToolHandler):
    """
    Create a pending follow-up task.

    The contact id is stored as given and not checked against the contact
    store. An unparseable dueDate is rejected with a validation error.
    """

    def __init__(self, stores: EntityStores):
        super().__init__("create_followup", stores)

    def run_tool(self, arguments: dict) -> Dict[str, Any]:
        due_date = parse_due_date(arguments["dueDate"])

        followups = self.stores.followups
        followup = followups.add(FollowUp(
            id=followups.new_id(),
            contactId=arguments["contactId"],
            title=arguments["title"],
            description=arguments.get("description") or "",
            dueDate=due_date,
            status="pending",
            createdAt=utcnow(),
        ))
        return {"success": True, "followUp": followup.to_dict()}


class ListFollowUpsTool(ToolHandler):
    def __init__(self, stores: EntityStores):
        super().__init__("list_followups", stores)

    def run_tool(self, arguments: dict) -> Dict[str, Any]:
        followups = self.stores.followups.values()

        contact_id = arguments.get("contactId")
        if contact_id:
            followups = [f for f in followups if f.contactId == contact_id]

        status = arguments.get("status")
        if status:
            followups = [f for f in followups if f.status == status]

        return {"success": True, "followUps": [f.to_dict() for f in followups]}
