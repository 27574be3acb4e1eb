import time
import traceback
from functools import wraps
from typing import List, Dict, Any, Callable, Type

_suite_state: Dict[str, List[Dict[str, Any]]] = {
    'tests': [],
    'results': []
}


class _c:
    """terminal color codes for the report."""
    ok = '\033[92m'
    fail = '\033[91m'
    warn = '\033[93m'
    info = '\033[94m'
    grey = '\033[90m'
    reset = '\033[0m'


class TestAssertionError(AssertionError):
    """raised by assert_that, so failures read differently from crashes."""
    pass


def test(description: str) -> Callable:
    """decorator to register a function as a test case."""

    def decorator(func: Callable) -> Callable:
        _suite_state['tests'].append({'func': func, 'description': description})

        @wraps(func)
        def wrapper(*args, **kwargs):
            return func(*args, **kwargs)

        return wrapper

    return decorator


def assert_that(condition: Any, message: str = "assertion failed") -> None:
    if not condition:
        raise TestAssertionError(message)


def assert_raises(exc_type: Type[BaseException], func: Callable[[], Any],
                  message: str = "expected an exception") -> BaseException:
    """
    calls func and checks it raises exc_type. returns the exception so the
    caller can look at it.
    """
    try:
        func()
    except exc_type as e:
        return e
    raise TestAssertionError(f"{message} ({exc_type.__name__} not raised)")


def run(title: str = "test run", verbose: bool = False) -> bool:
    """executes all registered tests, prints a report and returns whether everything passed."""
    print(f"\n{_c.info}--- {title} ---{_c.reset}")
    start_time = time.perf_counter()

    results = []
    for test_item in _suite_state['tests']:
        error = None
        try:
            test_item['func']()
        except TestAssertionError as e:
            error = f"assertion failed: {e}"
        except Exception as e:
            error = f"{type(e).__name__}: {e}"
            if verbose:
                traceback.print_exc()

        results.append({'passed': error is None, 'description': test_item['description'], 'error': error})

        if error is None:
            print(f"  {_c.ok}pass{_c.reset}  {test_item['description']}")
        else:
            print(f"  {_c.fail}FAIL{_c.reset}  {test_item['description']}")
            print(f"    {_c.grey}-> {error}{_c.reset}")

    _suite_state['results'] = results
    _print_summary(start_time)

    # registered tests are cleared so several suites can run in one process
    _suite_state['tests'] = []
    return all(r['passed'] for r in results)


def _print_summary(start_time: float) -> None:
    duration = (time.perf_counter() - start_time) * 1000
    results = _suite_state['results']

    total = len(results)
    passed_count = sum(1 for r in results if r['passed'])
    failed_count = total - passed_count

    summary_color = _c.ok if failed_count == 0 else _c.fail

    print(f"\n{summary_color}--- summary ---{_c.reset}")
    print(f"  ran {_c.info}{total}{_c.reset} tests in {_c.warn}{duration:.2f}ms{_c.reset}")
    print(f"  {_c.ok}passed: {passed_count}{_c.reset}, {_c.fail}failed: {failed_count}{_c.reset}\n")
