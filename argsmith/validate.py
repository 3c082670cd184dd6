from argsmith.exceptions import RequiredMissingError
from argsmith.registry import Registry


def validate(registry: Registry) -> bool:
    """Post-scan pass over every specification.

    Options are checked before positionals; each group in registration order.

    Raises
    ------
    RequiredMissingError
        First required specification that was never provided, named by its primary alias.

    Returns
    -------
    bool
        ``True`` if the help option was given; required checks are skipped in that case.
    """
    help_spec = registry.help_spec
    if help_spec is not None and help_spec.node.exists:
        return True

    options = [x for x in registry if not x.is_positional]
    for spec in options + registry.positionals:
        if spec.required and not spec.node.exists:
            if spec.is_positional:
                raise RequiredMissingError("argument is required", spec.name)
            raise RequiredMissingError("option is required", spec.name)
    return False
