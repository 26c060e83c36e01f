import time
import traceback
from functools import wraps
from typing import List, Dict, Any, Callable, Optional, Type

_suite_state: Dict[str, List[Dict[str, Any]]] = {
    'tests': [],
    'results': []
}

PASS_FACE = '(^ ω ^)'
FAIL_FACE = '(ﾉಥДಥ)ﾉ'
SUMMARY_FACE = '☆*:.｡.o(≧▽≦)o.｡.:*☆'


class _c:
    """a tiny, silent class for holding color codes."""
    ok = '\033[92m'
    fail = '\033[91m'
    warn = '\033[93m'
    info = '\033[94m'
    grey = '\033[90m'
    reset = '\033[0m'


# --- custom exception for assertions ---

class TestAssertionError(AssertionError):
    """custom error to distinguish assertion failures from other exceptions."""
    pass

# --- public api ---

def test(description: str) -> Callable:
    """
    decorator to register a function as a test case.
    the function stays callable, so pytest can collect the same module.
    """

    def decorator(func: Callable) -> Callable:
        _suite_state['tests'].append({'func': func, 'description': description})

        @wraps(func)
        def wrapper(*args, **kwargs):
            return func(*args, **kwargs)

        return wrapper

    return decorator


def assert_that(condition: Any, message: str = "assertion failed") -> None:
    """custom assertion that raises a specific, catchable error type."""
    if not condition:
        raise TestAssertionError(message)


def assert_raises(error_type: Type[BaseException], func: Callable[[], Any],
                  message: str = "expected an exception") -> BaseException:
    """calls func and asserts it raises error_type. returns the caught error."""
    try:
        func()
    except error_type as e:
        return e
    raise TestAssertionError(f"{message}: {error_type.__name__} was not raised")


class counting:
    """wraps a callable and records how many times it was invoked."""

    def __init__(self, func: Callable):
        self.func = func
        self.calls = 0

    def __call__(self, *args, **kwargs):
        self.calls += 1
        return self.func(*args, **kwargs)


def run(title: str = "test run", only: Optional[str] = None, verbose: bool = False) -> int:
    """
    runs the registered tests and prints a report.

    ``only`` keeps the tests whose description contains it. ``verbose`` prints
    the traceback of errors that are not assertion failures. returns the number
    of failures, so ``sys.exit(run(...))`` reports them to the shell.
    """
    selected = [item for item in _suite_state['tests'] if only is None or only in item['description']]
    print(f"\n{_c.info}--- {title}: {len(selected)} tests ---{_c.reset}")
    started = time.perf_counter()
    results = []

    for item in selected:
        outcome = _run_one(item['func'], verbose)
        results.append({'description': item['description'], 'error': outcome})
        if outcome is None:
            print(f"  {_c.ok}✔ pass{_c.reset}  {PASS_FACE}  {item['description']}")
        else:
            print(f"  {_c.fail}✖ fail{_c.reset}  {FAIL_FACE}  {item['description']}")
            print(f"    {_c.grey}└─> {outcome}{_c.reset}")

    _suite_state['results'] = results
    # registered tests belong to one run; a script may run several suites
    _suite_state['tests'] = []
    return _print_summary(results, time.perf_counter() - started)


def _run_one(func: Callable, verbose: bool) -> Optional[str]:
    try:
        func()
    except TestAssertionError as e:
        return f"assertion failed: {e}"
    except Exception as e:
        if verbose:
            traceback.print_exc()
        return f"{type(e).__name__}: {e}"
    return None


def _print_summary(results: List[Dict[str, Any]], elapsed: float) -> int:
    failed = [r['description'] for r in results if r['error'] is not None]
    color = _c.fail if failed else _c.ok

    print(f"\n{color}--- summary ---{_c.reset}")
    print(f"  {SUMMARY_FACE}  ran {_c.info}{len(results)}{_c.reset} tests in {_c.warn}{elapsed * 1000:.2f}ms{_c.reset}")
    print(f"  {_c.ok}passed: {len(results) - len(failed)}{_c.reset}, {_c.fail}failed: {len(failed)}{_c.reset}")
    for description in failed:
        print(f"    {_c.grey}- {description}{_c.reset}")
    print(f"{color}---------------{_c.reset}\n")
    return len(failed)
