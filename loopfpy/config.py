import json
import logging
from pathlib import Path

import numpy as np
import yaml

from loopfpy.batch import FUNCTIONS
from loopfpy.env import default_processes


class Config:
    """Evaluation grid read from a json or yaml file.

    A config names the functions to evaluate and the grid of arguments::

        functions:
          - Phi
          - name: Fa
            arguments: [y, z]
        grid:
          x: [0.5, 1.0]
          y: {start: 0.1, stop: 2.0, step: 0.1}
          z: [1.0]
        output:
          file: results.csv
        processes: 2

    A function given by name only takes the first grid axes in the order
    they appear; the full outer product of its axes is evaluated.
    """

    config: dict = {}
    path_output: str = ""

    def __init__(self, path_config: str, path_output: str = ""):
        if not isinstance(path_config, str):
            raise Exception("The config file path needs to be a string!")
        _path_config = Path(path_config)
        self.file_type = _path_config.suffix
        match self.file_type:
            case ".json":
                with open(path_config) as data:
                    self.config = json.load(data)
            case ".yaml" | ".yml":
                with open(path_config) as data:
                    self.config = yaml.safe_load(data)
            case _:
                raise Exception("The provided config file needs to be a json or yaml file!")
        if self.config is None:
            raise Exception(f"Could not read config file {path_config}. Check if the file exists.")

        self.log = logging.getLogger(self.__class__.__module__)

        output = self.config.get("output", {})
        self.path_output = output.get("file", "") if path_output == "" else path_output
        if self.path_output and not Path(self.path_output).is_absolute():
            self.path_output = str(_path_config.parent / self.path_output)

        self.__read()

    def __read(self):
        if "grid" not in self.config or not self.config["grid"]:
            raise Exception("Please provide a grid with at least one argument axis.")

        self.grid = {}
        for axis, data in self.config["grid"].items():
            if isinstance(data, list):
                self.grid[axis] = np.array(data, dtype=float)
            elif isinstance(data, dict):
                self.grid[axis] = np.arange(data["start"], data["stop"], data["step"])
            elif isinstance(data, (int, float)):
                self.grid[axis] = np.array([data], dtype=float)
            else:
                raise Exception(
                    f"Please provide the grid axis {axis} as an array, a number, or the (start, stop, step) numpy.arange parameters."
                )

        if "functions" not in self.config or not self.config["functions"]:
            raise Exception("Please provide at least one function to evaluate.")

        axes = list(self.grid)
        self.functions = []
        for entry in self.config["functions"]:
            name = entry if isinstance(entry, str) else entry["name"]
            if name not in FUNCTIONS:
                raise ValueError(f"Unknown loop function {name!r} in config.")
            arity = FUNCTIONS[name][1]
            if isinstance(entry, dict) and "arguments" in entry:
                arguments = list(entry["arguments"])
            else:
                arguments = axes[:arity]
            if len(arguments) != arity:
                raise ValueError(
                    f"{name} takes {arity} arguments, but {len(arguments)} grid axes are available."
                )
            missing = [a for a in arguments if a not in self.grid]
            if missing:
                raise ValueError(f"Grid axes {missing} used by {name} are not defined.")
            self.functions.append((name, arguments))

        self.processes = int(self.config.get("processes", default_processes()))
        if self.processes < 1:
            self.log.warning(f"processes = {self.processes} is invalid, using 1 instead")
            self.processes = 1

        self.log.info(
            f"Config with {len(self.functions)} functions on axes {', '.join(self.grid)} has been read"
        )

    def points(self, arguments: list[str]) -> list[np.ndarray]:
        """Flattened outer product of the given grid axes."""
        mesh = np.meshgrid(*[self.grid[a] for a in arguments], indexing="ij")
        return [np.ravel(m) for m in mesh]
