"""Exception and warning types raised by densepath."""


class OutOfRangeError(ValueError):
    """A vertex index lies outside ``[0, n)`` or a matrix is not square."""


class InvalidWeightError(ValueError):
    """A weight matrix holds a negative or NaN entry."""


class UnreachableVertexWarning(UserWarning):
    """A requested vertex has no path from the source.

    Issued by the reconstructor instead of producing a malformed path.
    """

    def __init__(self, vertices, source):
        self.vertices = list(vertices)
        self.source = source
        listed = ", ".join(str(v) for v in self.vertices)
        noun = "Vertex" if len(self.vertices) == 1 else "Vertices"
        super().__init__(f"{noun} {listed} unreachable from source {source}")


__all__ = ["OutOfRangeError", "InvalidWeightError", "UnreachableVertexWarning"]
