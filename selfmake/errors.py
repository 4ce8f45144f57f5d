class BuildError(Exception):
    """Base class of every fatal condition raised by self-make.

    Core code raises these instead of exiting so that callers (and tests) decide
    what happens; the entry script turns them into a diagnostic and exit status 1
    through `utils.fatal_errors`.
    """


class ConfigError(BuildError):
    pass


class SpawnError(BuildError):
    def __init__(self, program: str, reason: str) -> None:
        super().__init__(f'failed to spawn "{program}": {reason}')
        self.program = program


class SignalError(BuildError):
    def __init__(self, signum: int) -> None:
        super().__init__(f'Build terminated with signal {signum}')
        self.signum = signum


class MissingOutputError(BuildError):
    def __init__(self, output: str) -> None:
        super().__init__(f'No command provided to build {output}')
        self.output = output


class BuildStepError(BuildError):
    def __init__(self, output: str) -> None:
        super().__init__(f'Failed to build {output}')
        self.output = output


class CycleError(BuildError):
    def __init__(self, outputs: list[str]) -> None:
        super().__init__(f'dependency cycle detected: {" -> ".join(outputs)}')
        self.outputs = outputs


class RenameError(BuildError):
    pass


class ExecError(BuildError):
    pass
