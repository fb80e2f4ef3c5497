from timeit import default_timer as timer
from queue import LifoQueue

_performance_trackers = LifoQueue()


def start_performance_tracking():
    """Start a performance timer, trackers nest and are ended in reverse order"""
    tracker = timer()
    _performance_trackers.put(tracker)
    return tracker


def end_performance_tracking() -> float:
    """End the most recent performance timer and return the difference in seconds"""
    if _performance_trackers.empty():
        raise RuntimeError("no performance tracker was started")
    tracker = _performance_trackers.get()
    return timer() - tracker


def track_runtime(func, **kwargs):
    """
    Wrap a function with performance trackers, return a tuple representing the function return value, and the time
    in seconds to perform said wrapped function
    """
    start = timer()
    ret = func(**kwargs)
    return ret, timer() - start


def track_operations(operation, arguments) -> (int, float):
    """
    Apply a map operation to every argument tuple in turn, e.g. track_operations(table.put, pairs)

    @param operation: A bound map operation such as put, get or remove
    @param arguments: An iterable of argument tuples
    @return: The number of operations performed and the total time in seconds
    """
    count = 0
    start = timer()
    for args in arguments:
        operation(*args)
        count += 1
    return count, timer() - start
