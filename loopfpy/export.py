import _pickle
import bz2
import json
import math
from pathlib import Path
from typing import Any

import pandas as pd
import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.dataclasses import dataclass
from scipy.io import savemat
from typing_extensions import Self

from loopfpy import __version__


@dataclass
class Evaluation:
    function: str = Field()
    arguments: list[str] = Field()
    points: list[list[float]] = Field()
    values: list[float] = Field()

    @model_validator(mode="after")
    def number_of_elements(self) -> Self:
        if len(self.points) != len(self.arguments):
            raise ValueError(
                f"Number of argument columns ({len(self.points)}) and argument names ({len(self.arguments)}) are not compatible"
            )
        for name, column in zip(self.arguments, self.points):
            if len(column) != len(self.values):
                raise ValueError(
                    f"Number of elements in {name} ({len(column)}) and values ({len(self.values)}) are not compatible"
                )
        return self

    @property
    def failures(self) -> int:
        """Number of points that returned a domain error."""
        return sum(1 for v in self.values if math.isnan(v))

    def to_dataframe(self) -> pd.DataFrame:
        df = pd.DataFrame(dict(zip(self.arguments, self.points)))
        df["value"] = self.values
        df.insert(0, "function", self.function)
        return df


class Export(BaseModel):
    source: str = Field(default="loopfpy")
    version: str = Field(default=__version__)
    evaluations: list[Evaluation] | list[dict] = Field(default=[])

    model_config: ConfigDict = ConfigDict(arbitrary_types_allowed=True)

    @field_validator("source")
    @classmethod
    def non_empty(cls, value: str) -> str:
        if not value:
            raise ValueError("The export source must not be empty")
        return value

    def model_post_init(self, __context: Any) -> None:
        self.evaluations = [
            Evaluation(**e) if isinstance(e, dict) else e for e in self.evaluations
        ]

    def to_dataframe(self) -> pd.DataFrame:
        """Long-format table with one row per evaluated point."""
        if not self.evaluations:
            return pd.DataFrame(columns=["function", "value"])
        return pd.concat([e.to_dataframe() for e in self.evaluations], ignore_index=True)

    def save(self, filename: str | Path) -> None:
        """Write the export; the format follows the file suffix."""
        path = Path(filename)
        data = self.model_dump()

        match path.suffix:
            case ".json":
                path.write_text(json.dumps(data, indent=4))
            case ".yml" | ".yaml":
                path.write_text(yaml.dump(data))
            case ".pkl" | ".bz2":
                with _open_binary(path, "wb") as f:
                    _pickle.dump(data, f)
            case ".mat":
                # one matrix per function, columns are the arguments followed by the value
                savemat(
                    path,
                    {e.function: e.to_dataframe().drop(columns="function").to_numpy() for e in self.evaluations},
                )
            case ".csv":
                self.to_dataframe().to_csv(path, index=False)
            case _:
                raise ValueError(f"Unknown file extension {path.suffix}")

    @classmethod
    def load(cls, filename: str | Path) -> "Export":
        path = Path(filename)

        match path.suffix:
            case ".json":
                data = json.loads(path.read_text())
            case ".yml" | ".yaml":
                data = yaml.safe_load(path.read_text())
            case ".pkl" | ".bz2":
                with _open_binary(path, "rb") as f:
                    data = _pickle.load(f)
            case _:
                raise ValueError(f"Cannot load file extension {path.suffix}")
        return cls(**data)


def _open_binary(path: Path, mode: str):
    if path.suffix == ".bz2":
        return bz2.BZ2File(path, mode)
    return open(path, mode)
