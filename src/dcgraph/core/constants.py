"""Core constants and enums."""

from enum import Enum

# Payload the platform sends when a user taps "Get Started"
GET_STARTED_PAYLOAD = "__ALREADY_GOT_STARTED__"

# Node keys are wrapped in these delimiters to tell them apart from other payloads
KEY_DELIMITER = "__"

# Descriptor fields used for linking nodes
PAYLOAD_FIELD = "payload"
TRANSITION_FIELD = "transition_to"

# Prefix for send operations on the context when no explicit mapping exists
SEND_PREFIX = "send_"


class ActionType(str, Enum):
    """Outbound action types a node may carry."""

    TEXT = "text"
    ATTACHMENT = "attachment"
    IMAGE = "image"
    AUDIO = "audio"
    VIDEO = "video"
    FILE = "file"
    TEMPLATE = "template"
    BUTTON_TEMPLATE = "button_template"
    GENERIC_TEMPLATE = "generic_template"
    LIST_TEMPLATE = "list_template"
    MEDIA_TEMPLATE = "media_template"
    RECEIPT_TEMPLATE = "receipt_template"
    OPEN_GRAPH_TEMPLATE = "open_graph_template"
    AIRLINE_BOARDING_PASS_TEMPLATE = "airline_boarding_pass_template"
    AIRLINE_CHECKIN_TEMPLATE = "airline_checkin_template"
    AIRLINE_ITINERARY_TEMPLATE = "airline_itinerary_template"
    AIRLINE_UPDATE_TEMPLATE = "airline_update_template"
    QUICK_REPLIES = "quick_replies"


SEND_OPERATIONS: dict[ActionType, str] = {
    ActionType.TEXT: "send_text",
    ActionType.ATTACHMENT: "send_attachment",
    ActionType.IMAGE: "send_image",
    ActionType.AUDIO: "send_audio",
    ActionType.VIDEO: "send_video",
    ActionType.FILE: "send_file",
    ActionType.TEMPLATE: "send_template",
    ActionType.BUTTON_TEMPLATE: "send_button_template",
    ActionType.GENERIC_TEMPLATE: "send_generic_template",
    ActionType.LIST_TEMPLATE: "send_list_template",
    ActionType.MEDIA_TEMPLATE: "send_media_template",
    ActionType.RECEIPT_TEMPLATE: "send_receipt_template",
    ActionType.OPEN_GRAPH_TEMPLATE: "send_open_graph_template",
    ActionType.AIRLINE_BOARDING_PASS_TEMPLATE: "send_airline_boarding_pass_template",
    ActionType.AIRLINE_CHECKIN_TEMPLATE: "send_airline_checkin_template",
    ActionType.AIRLINE_ITINERARY_TEMPLATE: "send_airline_itinerary_template",
    ActionType.AIRLINE_UPDATE_TEMPLATE: "send_airline_update_template",
    ActionType.QUICK_REPLIES: "send_quick_replies",
}

# Positional argument (after the type tag) holding linkable descriptors
LINKED_ARGUMENT_POSITIONS: dict[ActionType, int] = {
    ActionType.BUTTON_TEMPLATE: 2,
    ActionType.QUICK_REPLIES: 3,
}
