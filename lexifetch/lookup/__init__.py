"""Remote dictionary lookup."""

from lexifetch.lookup.client import WebstersClient
from lexifetch.lookup.parsing import PageParseError, parse_definition_page, split_lead_paragraph

__all__ = ["PageParseError", "WebstersClient", "parse_definition_page", "split_lead_paragraph"]
