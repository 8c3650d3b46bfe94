import os
import typing as tp

Path = tp.Union[str, os.PathLike]

Entry = tp.Tuple[str, float]
Entries = tp.List[Entry]
Row = tp.List[str]
