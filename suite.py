import sys
import time
import traceback
from functools import wraps
from typing import List, Dict, Any, Callable, Optional, Type

_registry: Dict[str, List[Dict[str, Any]]] = {
    'cases': [],
    'results': []
}


class _c:
    """ansi colour codes for the report."""
    ok = '\033[92m'
    fail = '\033[91m'
    warn = '\033[93m'
    info = '\033[94m'
    grey = '\033[90m'
    reset = '\033[0m'


class CheckFailed(AssertionError):
    """an assert_that failure, as opposed to an unexpected error in the code under test."""
    pass

# --- public api ---

def test(description: str) -> Callable:
    """
    decorator registering a function as a case for run().
    the function is returned unchanged in behaviour, so pytest collects it too.
    """

    def decorator(func: Callable) -> Callable:
        _registry['cases'].append({'func': func, 'description': description})

        @wraps(func)
        def wrapper(*args, **kwargs):
            return func(*args, **kwargs)

        return wrapper

    return decorator


def assert_that(condition: Any, message: str = "assertion failed") -> None:
    """raise CheckFailed when condition is falsy."""
    if not condition:
        raise CheckFailed(message)


def assert_raises(error_type: Type[BaseException], func: Callable, *args: Any, **kwargs: Any) -> BaseException:
    """call func and require it to raise error_type; returns the raised error for further checks."""
    try:
        func(*args, **kwargs)
    except error_type as e:
        return e
    raise CheckFailed(f"expected {error_type.__name__} from {getattr(func, '__name__', func)}")


def run(title: str = "test run", keyword: Optional[str] = None, verbose: bool = False) -> int:
    """
    runs registered cases (optionally only those whose description contains keyword),
    prints a report and returns a process exit status.
    """
    print(f"\n{_c.info}--- starting: {title} ---{_c.reset}")
    start_time = time.perf_counter()

    _registry['results'] = []
    cases = [c for c in _registry['cases'] if keyword is None or keyword in c['description']]

    for case in cases:
        description = case['description']
        error = None

        try:
            case['func']()
        except CheckFailed as e:
            error = f"check failed: {e}"
        except Exception as e:
            error = f"{type(e).__name__}: {e}"
            if verbose:
                traceback.print_exc()

        _registry['results'].append({'passed': error is None, 'description': description, 'error': error})

        if error is None:
            print(f"  {_c.ok}pass{_c.reset}  {description}")
        else:
            print(f"  {_c.fail}FAIL{_c.reset}  {description}")
            print(f"    {_c.grey}-> {error}{_c.reset}")

    failed = _print_summary(start_time)

    # cases are cleared so several modules can run one after another in a process
    _registry['cases'] = []
    return 1 if failed else 0


def _print_summary(start_time: float) -> int:
    """prints totals; returns the number of failures."""
    duration = (time.perf_counter() - start_time) * 1000
    results = _registry['results']

    total = len(results)
    passed_count = sum(1 for r in results if r['passed'])
    failed_count = total - passed_count

    colour = _c.ok if failed_count == 0 else _c.fail

    print(f"\n{colour}--- summary ---{_c.reset}")
    print(f"  ran {_c.info}{total}{_c.reset} cases in {_c.warn}{duration:.2f}ms{_c.reset}")
    print(f"  {_c.ok}passed: {passed_count}{_c.reset}, {_c.fail}failed: {failed_count}{_c.reset}")
    print(f"{colour}---------------{_c.reset}\n")
    return failed_count


def main(title: str) -> None:
    """entry point for `python some_tests.py [keyword]`"""
    words = [a for a in sys.argv[1:] if not a.startswith('-')]
    keyword = words[0] if words else None
    sys.exit(run(title=title, keyword=keyword, verbose='-v' in sys.argv))
