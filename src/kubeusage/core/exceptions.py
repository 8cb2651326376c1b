class KubeUsageError(Exception):
    """Base exception for kubeusage."""

    pass


class ClusterUnavailable(KubeUsageError):
    """Raised when the Kubernetes API cannot be reached or a call to it fails."""

    pass


class WorkloadNotFound(KubeUsageError):
    """Raised when the requested workload does not exist in the namespace."""

    def __init__(self, namespace: str, name: str):
        self.namespace = namespace
        self.name = name
        super().__init__(f"StatefulSet '{name}' not found in namespace '{namespace}'")


class MetricParseError(KubeUsageError):
    """Base exception for errors while parsing a rendered Prometheus vector."""

    pass


class MalformedMetricLine(MetricParseError):
    """Raised when a vector line is not of the form '<labels> => <value> @<ts>'."""

    def __init__(self, line: str):
        self.line = line
        super().__init__(f"metrics {line!r} is invalid")


class InvalidMetricValue(MetricParseError):
    """Raised when the value token of a vector line is not a float."""

    def __init__(self, line: str, token: str):
        self.line = line
        self.token = token
        super().__init__(f"invalid metric value {token!r} in line {line!r}")


class BackendQueryError(KubeUsageError):
    """Raised when Prometheus rejects or fails to evaluate a query."""

    def __init__(self, message: str, error_type: str = None):
        self.error_type = error_type
        if error_type:
            message = f"{error_type}: {message}"
        super().__init__(message)


class BackendUnavailable(BackendQueryError):
    """Raised when Prometheus cannot be reached at all."""

    pass
