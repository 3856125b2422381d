"""Exception types shared by the algorithms and the corpus tooling."""


class StudyGuideError(Exception):
    """Base class for tooling errors."""


class ConfigError(StudyGuideError):
    pass


class CorpusError(StudyGuideError):
    pass


class CycleError(ValueError):
    """Raised by topological sorts. `nodes` are those left on or behind a cycle."""

    def __init__(self, nodes):
        self.nodes = list(nodes)
        super().__init__(f"graph has a cycle through {self.nodes}")
