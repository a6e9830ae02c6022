"""
Static HTML pages served by the API.
"""

from html import escape

EXAMPLE_TARGETS = [
    ("https://www.github.com", "github.com"),
    ("https://www.wikipedia.org", "wikipedia.org"),
]

FORM_TEMPLATE = """
<html><body style="font-family: monospace">
<h3>select example to turn to pdf</h3>
<form action="process" method="post">
    <select id="new_data" name="new_data" class="tag-select chzn-done" multiple="" >
{options}
    </select>
    <input type="Submit" value="Send" />
</form>
</body></html>
"""

FAILURE_TEMPLATE = """
<html><body style="font-family: monospace">
<h3>could not render {url}</h3>
<p>{error}</p>
<a href="/">back</a>
</body></html>
"""

GRAPHIQL_PAGE = """
<!DOCTYPE html>
<html>
<head>
  <title>GraphiQL</title>
  <link rel="stylesheet" href="https://unpkg.com/graphiql@3/graphiql.min.css" />
</head>
<body style="margin: 0;">
  <div id="graphiql" style="height: 100vh;"></div>
  <script crossorigin src="https://unpkg.com/react@18/umd/react.production.min.js"></script>
  <script crossorigin src="https://unpkg.com/react-dom@18/umd/react-dom.production.min.js"></script>
  <script crossorigin src="https://unpkg.com/graphiql@3/graphiql.min.js"></script>
  <script>
    const fetcher = GraphiQL.createFetcher({ url: "/graphql" });
    ReactDOM.createRoot(document.getElementById("graphiql")).render(
      React.createElement(GraphiQL, { fetcher: fetcher })
    );
  </script>
</body>
</html>
"""


def form_page() -> str:
    options = "\n".join(
        f'        <option value="{escape(url)}">{escape(label)}</option>'
        for url, label in EXAMPLE_TARGETS
    )
    return FORM_TEMPLATE.format(options=options)


def failure_page(url: str, error: str) -> str:
    return FAILURE_TEMPLATE.format(url=escape(url), error=escape(error))
