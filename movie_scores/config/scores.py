# Accepted range for a single submitted score. Enforced by the request DTOs,
# the aggregator itself accepts any finite value.
MIN_SCORE = 0.0
MAX_SCORE = 5.0

# Paging defaults for the movie catalogue
DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100
