from prometheus_client import Counter, Histogram, generate_latest, CONTENT_TYPE_LATEST
from fastapi import Response

# Метрики для HTTP запросов
http_requests_total = Counter(
    'http_requests_total',
    'Total HTTP requests',
    ['method', 'endpoint', 'status']
)

http_request_duration_seconds = Histogram(
    'http_request_duration_seconds',
    'HTTP request duration in seconds',
    ['method', 'endpoint']
)

# Хранилище студентов
student_mutations_total = Counter(
    'student_mutations_total',
    'Persisted student mutations',
    ['operation']
)

# Аутентификация
auth_failures_total = Counter(
    'auth_failures_total',
    'Rejected authentication attempts',
    ['guard', 'reason']
)

def metrics_endpoint():
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
