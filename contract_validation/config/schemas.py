"""
Hand-written JSON Schemas for the Petstore domain entities.

These are the first of the two contracts a response is checked against
(the second being the published swagger document). They are stricter than
the swagger definitions: ids are integers, names are non-empty.

Schemas:
1. CATEGORY_SCHEMA
2. TAG_SCHEMA
3. PET_SCHEMA             — embeds 1 and 2 inline
4. ERROR_RESPONSE_SCHEMA  — the Petstore "ApiResponse" envelope
"""
from typing import List

PET_STATUSES: List[str] = ["available", "pending", "sold"]

# =============================================================================
# 1. Category
# =============================================================================
CATEGORY_SCHEMA: dict = {
    "type": "object",
    "properties": {
        "id": {"type": "integer", "minimum": 0},
        "name": {"type": "string"},
    },
}

# =============================================================================
# 2. Tag
# =============================================================================
TAG_SCHEMA: dict = {
    "type": "object",
    "properties": {
        "id": {"type": "integer", "minimum": 0},
        "name": {"type": "string"},
    },
}

# =============================================================================
# 3. Pet
# =============================================================================
PET_SCHEMA: dict = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "title": "Pet",
    "type": "object",
    "required": ["id", "name", "photoUrls"],
    "properties": {
        "id": {
            "type": "integer",
            "minimum": 0,
            "description": "Pet id (int64 on the wire)",
        },
        "name": {
            "type": "string",
            "minLength": 1,
        },
        "category": CATEGORY_SCHEMA,
        "photoUrls": {
            "type": "array",
            "items": {"type": "string"},
        },
        "tags": {
            "type": "array",
            "items": TAG_SCHEMA,
        },
        "status": {
            "type": "string",
            "enum": PET_STATUSES,
            "description": "Pet status in the store",
        },
    },
}

# =============================================================================
# 4. ApiResponse (error envelope)
# =============================================================================
ERROR_RESPONSE_SCHEMA: dict = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "title": "ApiResponse",
    "type": "object",
    "required": ["code", "type", "message"],
    "properties": {
        "code": {"type": "integer"},
        "type": {"type": "string"},
        "message": {"type": "string"},
    },
}
