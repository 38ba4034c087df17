from enum import Enum

class Action(Enum):
    CREATE_TICKET = "post_v1_abuse_tickets"
    LIST_TICKETS = "get_v1_abuse_tickets"
