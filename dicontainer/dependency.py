from inspect import Parameter


class Dependency:
    __slots__ = ("name", "annotation", "kind", "default")

    def __init__(self, name, annotation, kind=None, default=Parameter.empty):
        self.name = name
        self.annotation = annotation
        self.kind = kind if kind is not None else Parameter.POSITIONAL_OR_KEYWORD
        self.default = default

    @property
    def has_default(self) -> bool:
        return self.default is not Parameter.empty

    @property
    def positional_only(self) -> bool:
        return self.kind is Parameter.POSITIONAL_ONLY

    def __repr__(self):
        return f"<Dependency {self.name}: {self.annotation!r}>"
