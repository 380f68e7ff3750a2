from enum import Enum


class HttpStatusCode(Enum):
    """Statuses the Confluence REST API answers with that the client checks for"""

    OK = 200
    # Space deletion runs as a long running task
    ACCEPTED = 202
    # Deletes, watches and label removal return no body
    NO_CONTENT = 204

    # Watch status of a label that does not exist
    FORBIDDEN = 403
    # System info is not offered by every server
    NOT_FOUND = 404
