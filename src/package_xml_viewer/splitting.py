"""
Split member names of parent-scoped metadata types into Parent and Member.

Some metadata types name their members relative to a parent object, e.g. the
``CustomField`` member ``Account.Active__c`` or the ``Layout`` member
``Account-Account Layout``. Splitting on the first separator gives a separate
Parent column in the output.
"""

from typing import Dict, List

from package_xml_viewer.models import Component

SPLIT_SEPARATORS: Dict[str, str] = {
    "AssignmentRule": ".",
    "CustomField": ".",
    "ListView": ".",
    "RecordType": ".",
    "SharingCriteriaRule": ".",
    "SharingOwnerRule": ".",
    "SharingTerritoryRule": ".",
    "Layout": "-",
}


def split_parent(component: Component) -> Component:
    """Return the component with its parent split out, if its type has one."""
    separator = SPLIT_SEPARATORS.get(component.type_name)
    if separator is None or separator not in component.member_name:
        return component
    parent, member = component.member_name.split(separator, 1)
    return Component(type_name=component.type_name, member_name=member, parent_name=parent)


def split_parents(components: List[Component]) -> List[Component]:
    """Apply :func:`split_parent` to every component, keeping order."""
    return [split_parent(c) for c in components]
