"""Fixed endpoint and reusable phrases."""
# JSONPlaceholder: all posts, returned as a JSON array.
ENDPOINT = "https://jsonplaceholder.typicode.com/posts"

STATUS_OK = 200

FETCHED_OK = "Successfully fetched data:"
ERROR_FETCH = "Error fetching data"
