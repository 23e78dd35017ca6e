import cProfile
import logging
import pstats
from functools import cached_property

import pyperf

from loopfpy.batch import evaluate_array
from loopfpy.config import Config
from loopfpy.export import Evaluation, Export


class LoopF:
    """Evaluates the functions of a config file on its grid and exports them."""

    path_config: str
    path_output: str
    _config: Config | None

    def __init__(self, path_config: str, path_output: str = "", processes: int | None = None):
        self.path_config = path_config
        self.path_output = path_output
        self._config = Config(path_config=self.path_config, path_output=self.path_output)
        self.processes = self.config.processes if processes is None else processes
        self.evaluations: list[Evaluation] = []
        self.log = logging.getLogger(self.__class__.__module__)

    @cached_property
    def config(self) -> Config:
        if self._config is None:
            self._config = Config(path_config=self.path_config, path_output=self.path_output)
        return self._config

    def run(self) -> list[Evaluation]:
        self.evaluations = []
        for name, arguments in self.config.functions:
            points = self.config.points(arguments)
            values = evaluate_array(name, *points, processes=self.processes)
            evaluation = Evaluation(
                function=name,
                arguments=arguments,
                points=[p.tolist() for p in points],
                values=values.tolist(),
            )
            if evaluation.failures:
                self.log.warning(f"{name}: {evaluation.failures} points are out of domain")
            self.evaluations.append(evaluation)
        return self.evaluations

    def export(self, filename: str = "") -> Export:
        export = Export(evaluations=self.evaluations)
        filename = filename or self.config.path_output
        if filename:
            export.save(filename)
            self.log.info(f"Results have been written to {filename}")
        return export

    @staticmethod
    def benchmark(config_path: str | None = None, runner: pyperf.Runner | None = None):
        if config_path is None:
            raise Exception("Please provide a config file!")
        if runner is None:
            raise Exception("Please provide a runner for benchmarking!")
        runner.bench_func("loopf_init", lambda: LoopF(config_path))
        loopf_instance = LoopF(config_path)
        runner.bench_func("loopf_run", lambda: loopf_instance.run())

    @staticmethod
    def profiler(config_path: str | None = None, output: str | None = None):
        if config_path is None:
            raise Exception("Please provide a config file!")
        with cProfile.Profile() as pr:
            loopf_instance = LoopF(config_path)
            loopf_instance.run()
            stats = pstats.Stats(pr).sort_stats(pstats.SortKey.TIME)
            stats.print_stats() if output is None else stats.dump_stats(output)
            return loopf_instance
