"""
Render Engine

Binds an Element to the template registered for its type. Rendering is a
pure function of (template, element): the template only sees the element
snapshot and the fixed helper set, and a failure never yields partial output.
"""
from typing import Iterable, List, Optional

from formkit.data import DataModel
from formkit.error import FormkitException

from . import logger
from .element import Element
from .exceptions import RenderExecutionError, TemplateNotFound
from .registry import TemplateRegistry


class RenderResult(DataModel):
    element_id: str
    element_type: str
    html: Optional[str] = None
    error: Optional[dict] = None

    @property
    def ok(self):
        return self.error is None


class RenderEngine(object):
    def __init__(self, registry: TemplateRegistry):
        self._registry = registry

    @property
    def registry(self):
        return self._registry

    def render(self, element: Element) -> str:
        template = self._registry.lookup(element.type)
        if template is None:
            raise TemplateNotFound(
                "R00.404",
                f"No template registered for element type [{element.type}]",
                {"type": element.type}
            )

        try:
            return template.render(element.snapshot())
        except Exception as e:
            logger.debug('Rendering element [%s] of type [%s] failed: %s', element.id, element.type, e)
            raise RenderExecutionError(
                "R00.422",
                f"Unable to render element [{element.id}] of type [{element.type}]",
                {"type": element.type, "cause": str(e)}
            ) from e

    def render_all(self, elements: Iterable[Element]) -> List[RenderResult]:
        """
        Render every element in the supplied order. A failing element is
        reported in its own result and does not stop the others.
        """
        results = []
        for element in elements:
            try:
                html = self.render(element)
            except FormkitException as e:
                results.append(RenderResult(element_id=element.id, element_type=element.type, error=e.content))
            else:
                results.append(RenderResult(element_id=element.id, element_type=element.type, html=html))

        return results


def render(element: Element, registry: TemplateRegistry) -> str:
    return RenderEngine(registry).render(element)
