class MonteCarloError(Exception):
    pass


class UsageError(MonteCarloError):
    pass


class InvalidSampleCount(MonteCarloError, ValueError):
    pass


class InvalidIntegrandIndex(MonteCarloError, IndexError):
    pass


class InvalidThreadCount(MonteCarloError, ValueError):
    pass


class AllocationFailure(MonteCarloError, MemoryError):
    pass


class WorkerFailure(MonteCarloError, RuntimeError):
    def __init__(self, worker, message):
        super().__init__(f"worker {worker} failed: {message}")
        self.worker = worker
