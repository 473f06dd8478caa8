"""Human-readable names for documented entities."""

from xmldoc_help.member_descriptor import MemberDescriptor, TypeRef


def member_display_name(descriptor: MemberDescriptor) -> str:
    """Return the fully-qualified name of a type or member."""
    if isinstance(descriptor, TypeRef):
        return descriptor.full_name
    return f"{descriptor.owner.full_name}.{descriptor.name}"
