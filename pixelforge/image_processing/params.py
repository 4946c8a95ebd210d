# -*- coding: utf-8 -*-
"""
Tunable Parameter Annotations - Declarative filter options via typing.Annotated.

Filters expose their runtime options as ``typing.Annotated`` class-body
fields carrying ``Options`` and ``Desc`` markers. ``collect_param_specs``
turns those fields into ``ParamSpec`` records at class-definition time and
``make_init`` builds a keyword-only ``__init__`` that validates them.
This is the only configuration surface of the library; there are no
config files or environment variables.

Usage
-----
::

    from typing import Annotated
    from pixelforge.image_processing.params import Desc, Options

    class MyFilter(ImageTransform):
        border: Annotated[str, Options('zero', 'copy'),
                          Desc('Border policy')] = 'zero'

Author
------
Steven Siebert

License
-------
MIT License
Copyright (c) 2024 geoint.org
See LICENSE file for full text.

Created
-------
2026-02-10

Modified
--------
2026-10-19
"""

# Standard library
import inspect
from typing import Annotated, Any, Optional, Tuple, get_origin, get_type_hints

# Pixelforge internal
from pixelforge.exceptions import ValidationError


class ParamMeta:
    """Base marker for tunable parameter metadata in ``Annotated`` types."""


class Options(ParamMeta):
    """Discrete choice constraint.

    Parameters
    ----------
    *choices
        Allowed values. At least one is required.
    """

    __slots__ = ('choices',)

    def __init__(self, *choices: Any) -> None:
        if not choices:
            raise ValueError("Options requires at least one choice")
        self.choices = choices

    def __repr__(self) -> str:
        return f"Options{self.choices!r}"


class Desc(ParamMeta):
    """Human-readable parameter description."""

    __slots__ = ('text',)

    def __init__(self, text: str) -> None:
        self.text = text

    def __repr__(self) -> str:
        return f"Desc({self.text!r})"


_MISSING = object()


class ParamSpec:
    """Resolved specification for a single tunable parameter.

    Attributes
    ----------
    name : str
        Keyword-argument name.
    param_type : type
        Expected Python type.
    default : Any
        Default value (``None`` when the parameter is required).
    description : str
        Text from the ``Desc`` marker, or ``''``.
    choices : tuple or None
        Allowed values from the ``Options`` marker.
    """

    __slots__ = ('name', 'param_type', 'default', 'required',
                 'description', 'choices')

    def __init__(
        self,
        name: str,
        param_type: type,
        default: Any = _MISSING,
        description: str = '',
        choices: Optional[Tuple] = None,
    ) -> None:
        self.name = name
        self.param_type = param_type
        self.required = default is _MISSING
        self.default = None if self.required else default
        self.description = description
        self.choices = choices

    def validate(self, value: Any) -> None:
        """Check *value* against the declared type and choices.

        Raises
        ------
        TypeError
            If *value* is not an instance of ``param_type``.
        ValidationError
            If *value* is not one of the declared choices.
        """
        if self.param_type is not object and not isinstance(value, self.param_type):
            raise TypeError(
                f"Parameter '{self.name}' must be "
                f"{self.param_type.__name__}, got {type(value).__name__}"
            )
        if self.choices is not None and value not in self.choices:
            raise ValidationError(
                f"Parameter '{self.name}' value {value!r} "
                f"is not in allowed choices {self.choices!r}"
            )

    def __repr__(self) -> str:
        text = (f"ParamSpec(name={self.name!r}, "
                f"param_type={self.param_type.__name__}, "
                f"required={self.required!r}")
        if not self.required:
            text += f", default={self.default!r}"
        if self.choices is not None:
            text += f", choices={self.choices!r}"
        return text + ")"


def collect_param_specs(cls: type) -> Tuple[ParamSpec, ...]:
    """Collect ``ParamSpec`` records from ``Annotated`` fields on *cls*.

    Only fields carrying at least one ``ParamMeta`` marker are tunable.
    Parent-class fields come first, then each class's fields in
    declaration order.
    """
    try:
        hints = get_type_hints(cls, include_extras=True)
    except (NameError, TypeError):
        return ()

    names = []
    for klass in reversed(cls.__mro__):
        for name in getattr(klass, '__annotations__', {}):
            if name in hints and name not in names:
                names.append(name)

    specs = []
    for name in names:
        hint = hints[name]
        if get_origin(hint) is not Annotated:
            continue
        markers = [m for m in hint.__metadata__ if isinstance(m, ParamMeta)]
        if not markers:
            continue
        options = next((m for m in markers if isinstance(m, Options)), None)
        desc = next((m for m in markers if isinstance(m, Desc)), None)
        specs.append(ParamSpec(
            name=name,
            param_type=hint.__args__[0],
            default=getattr(cls, name, _MISSING),
            description=desc.text if desc else '',
            choices=options.choices if options else None,
        ))
    return tuple(specs)


def make_init(param_specs: Tuple[ParamSpec, ...]):
    """Build a keyword-only ``__init__`` that validates *param_specs*."""

    def __init__(self, **kwargs):
        unexpected = set(kwargs) - {s.name for s in param_specs}
        if unexpected:
            raise TypeError(
                f"{type(self).__name__}() got unexpected "
                f"keyword arguments: {', '.join(sorted(unexpected))}"
            )
        for spec in param_specs:
            if spec.name in kwargs:
                value = kwargs[spec.name]
            elif not spec.required:
                value = spec.default
            else:
                raise TypeError(
                    f"{type(self).__name__}() missing required "
                    f"keyword argument: '{spec.name}'"
                )
            spec.validate(value)
            setattr(self, spec.name, value)

    params = [inspect.Parameter('self', inspect.Parameter.POSITIONAL_OR_KEYWORD)]
    for spec in param_specs:
        params.append(inspect.Parameter(
            spec.name,
            inspect.Parameter.KEYWORD_ONLY,
            default=inspect.Parameter.empty if spec.required else spec.default,
        ))
    __init__.__signature__ = inspect.Signature(params)
    __init__.__qualname__ = '__init__'
    return __init__
