"""Output accumulation for a single conversion."""


class DocumentBuilder:
    """Accumulates rendered fragments in call order.

    Fragments are joined as-is: no separators, no trimming.
    """

    def __init__(self) -> None:
        self._fragments: list[str] = []

    def append(self, *fragments: str) -> None:
        self._fragments.extend(fragments)

    def collect(self) -> str:
        return "".join(self._fragments)

    def __len__(self) -> int:
        return len(self._fragments)
