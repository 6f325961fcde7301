"""
Composition layer: programs of operations and the interpreter that runs them.

Operations from independent groups are executed uniformly: the
interpreter only needs to know which groups it accepts, and turns every
operation's request description into a transport call. A Program chains
operations; a step may depend on the previous step's result.

Example:
    interpreter = Interpreter(HttpClient())
    program = Program.of(GetUser("octocat")).then(
        lambda user: ListUserRepos(user.login))
    response = interpreter.run(program, Config(access_token="..."))
"""

import logging
from typing import Any, Callable, Iterable, Iterator, Optional, Tuple, Union

from .api import GHResponse, HttpClient, ProgramError
from .config import Config, GitHubConfig
from .operations import (
    ACTIVITY,
    GISTS,
    ISSUES,
    PULL_REQUESTS,
    REPOSITORIES,
    USERS,
    Operation,
    OperationGroup
)

logger = logging.getLogger(__name__)

DEFAULT_GROUPS: Tuple[OperationGroup, ...] = (
    USERS,
    PULL_REQUESTS,
    ACTIVITY,
    REPOSITORIES,
    ISSUES,
    GISTS
)

Step = Union[Operation, Callable[[Any], Operation]]


class Program:
    """
    An immutable sequence of steps.

    A step is either an Operation or a callable receiving the previous
    step's decoded result (None for the first step) and returning the
    Operation to run next.
    """

    def __init__(self, steps: Iterable[Step] = ()):
        self._steps: Tuple[Step, ...] = tuple(steps)

    @classmethod
    def of(cls, *steps: Step) -> 'Program':
        return cls(steps)

    def then(self, step: Step) -> 'Program':
        return Program(self._steps + (step,))

    @property
    def steps(self) -> Tuple[Step, ...]:
        return self._steps

    def __len__(self) -> int:
        return len(self._steps)

    def __iter__(self) -> Iterator[Step]:
        return iter(self._steps)

    def __repr__(self) -> str:
        return f"Program({list(self._steps)!r})"


class Interpreter:
    """
    Executes operations and programs against a transport.

    The transport is anything with HttpClient's ``execute`` signature, so
    it can be wrapped (rate-limit backoff, caching, recording) without
    touching the operations.
    """

    def __init__(self, transport: Any, groups: Iterable[OperationGroup] = DEFAULT_GROUPS):
        """
        Initialize the interpreter.

        Args:
            transport: Object exposing ``execute(method, path, config, ...)``
            groups: Operation groups this interpreter accepts
        """
        self.transport = transport
        self.groups: Tuple[OperationGroup, ...] = tuple(groups)

    @classmethod
    def from_env(cls) -> 'Interpreter':
        """Build an interpreter over an HttpClient configured from the environment."""
        return cls(HttpClient(GitHubConfig.from_env()))

    def with_groups(self, *groups: OperationGroup) -> 'Interpreter':
        """Return a new interpreter that also accepts the given groups."""
        return Interpreter(self.transport, self.groups + tuple(groups))

    def accepts(self, operation: Operation) -> bool:
        return any(group.contains(operation) for group in self.groups)

    def run(self, target: Union[Operation, Program], config: Optional[Config] = None) -> GHResponse:
        """
        Run an operation or a program.

        Args:
            target: Operation or Program
            config: Credentials and headers for every call; unauthenticated if omitted

        Returns:
            The operation's GHResponse, or for a program a GHResponse whose
            result lists every step's result. A failing step's response is
            returned unchanged and later steps are not executed.

        Raises:
            TypeError: If an operation belongs to no registered group
        """
        config = config or Config()
        if isinstance(target, Program):
            return self._run_program(target, config)
        return self.execute(target, config)

    def execute(self, operation: Operation, config: Config) -> GHResponse:
        if not isinstance(operation, Operation) or not self.accepts(operation):
            raise TypeError(f"No registered operation group handles {operation!r}")
        request = operation.request()
        logger.debug(f"Executing {type(operation).__name__}: {request.method} {request.path}")
        return self.transport.execute(
            request.method,
            request.path,
            config,
            query_params=request.params,
            pagination=request.pagination,
            body=request.body,
            headers=request.headers,
            decoder=request.decoder
        )

    def _run_program(self, program: Program, config: Config) -> GHResponse:
        results = []
        previous = None
        last: Optional[GHResponse] = None
        for index, step in enumerate(program):
            operation = self._next_operation(index, step, previous)
            if isinstance(operation, GHResponse):
                return operation
            response = self.execute(operation, config)
            if not response.ok:
                logger.debug(f"Program stopped at step {index}: {response.error}")
                return response
            results.append(response.result)
            previous = response.result
            last = response
        if last is None:
            return GHResponse.success(results, None)
        return GHResponse.success(results, last.status_code, last.headers)

    @staticmethod
    def _next_operation(index: int, step: Step, previous: Any) -> Union[Operation, GHResponse]:
        """Resolve a step to its operation, or to a failed response when it cannot be."""
        if isinstance(step, Operation):
            return step
        try:
            operation = step(previous)
        except Exception as e:
            logger.warning(f"Program step {index} raised {type(e).__name__}: {e}")
            return GHResponse.failure(ProgramError(f"Step {index} raised {type(e).__name__}: {e}", index, e))
        if not isinstance(operation, Operation):
            logger.warning(f"Program step {index} returned {operation!r} instead of an operation")
            return GHResponse.failure(
                ProgramError(f"Step {index} returned {type(operation).__name__}, not an operation", index))
        return operation
