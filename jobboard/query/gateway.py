"""
Query Gateway

Executes one GraphQL document against the static schema and a fresh
snapshot of the dataset, and always returns a {"data", "errors"} envelope.
Resolver failures stay isolated to the field they affect.
"""

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from graphql import graphql_sync

from jobboard.core.dataset import DatasetError, load_jobs
from jobboard.query.engine import QueryEngine
from jobboard.query.schema import schema

logger = logging.getLogger(__name__)


class RequestSnapshot:
    """
    Per-request execution context.

    Loads the dataset on first use and shares it between root fields of the
    same document. A load failure is remembered and re-raised to every
    resolver that asks for the data.
    """

    def __init__(self, data_file: Optional[Union[str, Path]] = None):
        self.data_file = data_file
        self._engine: Optional[QueryEngine] = None
        self._error: Optional[DatasetError] = None

    def engine(self) -> QueryEngine:
        if self._error is not None:
            raise self._error
        if self._engine is None:
            try:
                self._engine = QueryEngine(load_jobs(self.data_file))
            except DatasetError as e:
                self._error = e
                raise
        return self._engine


def process_query(
    query: str,
    variables: Optional[Dict[str, Any]] = None,
    operation_name: Optional[str] = None,
    data_file: Optional[Union[str, Path]] = None,
) -> Dict[str, Any]:
    """
    Resolve a query document and serialize the result envelope.
    """
    result = graphql_sync(
        schema,
        query,
        context_value=RequestSnapshot(data_file),
        variable_values=variables,
        operation_name=operation_name,
    )

    errors: List[Dict[str, Any]] = [error.formatted for error in result.errors or []]
    if errors:
        logger.warning(
            f"Query finished with {len(errors)} error(s): "
            f"{[e['message'] for e in errors]}"
        )

    return {"data": result.data, "errors": errors}
