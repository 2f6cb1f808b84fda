"""Function-calling declaration for the artwork search tool.

The parameter names mirror Artsy's ``artworksConnection`` filter
arguments so extracted arguments compile without renaming.
"""

from __future__ import annotations

from typing import Any

SEARCH_TOOL_NAME = "searchArtsyArtworks"


def build_search_tool() -> dict[str, Any]:
    """Return a fresh declaration of the artwork search tool.

    A new dict is built on every call so no request can mutate a
    schema another request is using.

    Returns:
        Tool declaration in OpenAI ``tools=[...]`` format.
    """
    return {
        "type": "function",
        "function": {
            "name": SEARCH_TOOL_NAME,
            "description": (
                "Searches the Artsy database for artworks based on various "
                "criteria provided by the user."
            ),
            "parameters": {
                "type": "object",
                "properties": {
                    "artistIDs": {
                        "type": "array",
                        "items": {"type": "string"},
                        "description": (
                            "Array of Artsy artist slugs or IDs "
                            "(e.g., ['pablo-picasso', 'andy-warhol']). "
                            "Extract slugs if names are mentioned."
                        ),
                    },
                    "keyword": {
                        "type": "string",
                        "description": (
                            "General keyword search term (searches title, artist "
                            "names, medium, etc.). Use if specific fields aren't "
                            "identified or as a fallback."
                        ),
                    },
                    "medium": {
                        "type": "string",
                        "description": (
                            "The medium of the artwork (e.g., 'painting', "
                            "'sculpture', 'photography', 'prints'). Use Artsy's "
                            "controlled vocabulary if possible."
                        ),
                    },
                    "color": {
                        "type": "string",
                        "description": (
                            "A dominant color in the artwork (e.g., 'red', 'blue', 'black')."
                        ),
                    },
                    "partnerIDs": {
                        "type": "array",
                        "items": {"type": "string"},
                        "description": (
                            "IDs or slugs of specific galleries or institutions, if mentioned."
                        ),
                    },
                    "forSale": {
                        "type": "boolean",
                        "description": (
                            "Filter for artworks currently marked as for sale, if the user asks."
                        ),
                    },
                    "attributionClass": {
                        "type": "array",
                        "items": {"type": "string"},
                        "description": (
                            "Filter by attribution class like 'unique', "
                            "'limited edition', 'open edition', if mentioned."
                        ),
                    },
                    "priceRange": {
                        "type": "string",
                        "description": (
                            "A price range string like '1000-5000' or '*-10000' "
                            "(for under 10k), if mentioned by user."
                        ),
                    },
                },
                "required": ["keyword"],
            },
        },
    }
