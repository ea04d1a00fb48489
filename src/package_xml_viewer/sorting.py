"""
Component ordering.
"""

from typing import List

from package_xml_viewer.models import Component, SortPolicy


def _by_type_key(component: Component):
    return (component.type_name, component.parent_name, component.member_name)


def sort_components(components: List[Component], policy: SortPolicy) -> List[Component]:
    """Order components according to a sort policy.

    ``BY_TYPE`` sorts by type name, then parent, then member name using plain
    codepoint comparison. Python's sort is stable, so duplicate entries keep
    their input order. ``AS_IS`` keeps document order.

    Args:
        components: Components in document order
        policy: Sort policy to apply

    Returns:
        New list; the input is never modified
    """
    if policy == SortPolicy.BY_TYPE:
        return sorted(components, key=_by_type_key)
    if policy == SortPolicy.AS_IS:
        return list(components)
    raise ValueError(f"Unsupported sort policy: {policy!r}")
