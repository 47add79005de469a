"""
Element Model

An Element describes one form control of a campaign form. The stored form
definition carries the wire names (``docid_form_element``, ``docids``, ...);
the model accepts either those or the python field names.

Usage:
    element = parse_element({
        "docid_form_element": "f1",
        "type": "select_element",
        "label": "Pick one",
        "select_options": [{"value": "a", "display": "A"}],
    })
"""
from typing import Dict, List, Optional

from pydantic import ConfigDict, Field, ValidationError
from pyrsistent import freeze

from formkit.data import DataModel

from .exceptions import ElementValidationError


class SelectOption(DataModel):
    """ One entry of a dropdown. `order` is advisory, options render as supplied. """
    order: int = 0
    value: str
    display: str


class Element(DataModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    # Identity
    id: str = Field(default="", alias="docid_form_element")
    ids: Dict[str, str] = Field(default_factory=dict, alias="docids")
    campaign_id: Optional[str] = Field(default=None, alias="docid_campaign")

    # Classification
    type: str = Field(min_length=1)
    order: int = 0

    # Presentation
    name: str = ""
    label: str = ""
    help_text: str = ""
    classes: List[str] = Field(default_factory=list)
    alert_class: str = ""
    placeholder: str = ""
    value: str = ""

    # Behavior flags
    is_multi_select: bool = False
    is_hidden: bool = False
    is_required: bool = False

    # Structured content
    select_options: List[SelectOption] = Field(default_factory=list)
    alert_messages: List[str] = Field(default_factory=list)

    # Checkbox / binary radio
    checkbox_value: Optional[str] = None
    radio_label_1: Optional[str] = None
    radio_value_1: Optional[str] = None
    radio_label_2: Optional[str] = None
    radio_value_2: Optional[str] = None

    def snapshot(self):
        """ Immutable mapping of field name to value that templates are bound to. """
        return freeze(self.model_dump(by_alias=False, exclude_none=False))


def parse_element(payload) -> Element:
    try:
        return Element.model_validate(payload)
    except ValidationError as e:
        raise ElementValidationError(
            "R00.400",
            "Invalid form element definition",
            e.errors(include_url=False, include_context=False)
        ) from e


def sort_elements(elements) -> List[Element]:
    """ Stable sort by `order`, for callers that position siblings before rendering. """
    return sorted(elements, key=lambda elm: elm.order)
