from dataclasses import dataclass


@dataclass(frozen=True)
class EditBlock:
    """
    One SEARCH/REPLACE pair as written by the model.

    Both fields keep their interior whitespace and line breaks verbatim.
    An empty `search` is a pure insertion; an empty `replace` is a deletion.
    """

    search: str
    replace: str

    @property
    def is_insertion(self) -> bool:
        return self.search == ""

    @property
    def is_deletion(self) -> bool:
        return self.replace == ""
