"""Example: decode a query response on a worker thread and consume it.

Run with:
    python examples/decode_example.py
"""

import json
import logging
import threading

from promresults import (
    DecodeError,
    LoggingWarningSink,
    ResponseDecoder,
    ResultFuture,
    get_logger,
    publish_decoded,
)

logger = get_logger(__name__)

QUERY = "avg(node_total_hourly_cost) by (node, cluster_id)[1h:5m]"

# What the HTTP client would hand over
BODY = json.dumps(
    {
        "status": "success",
        "data": {
            "resultType": "matrix",
            "result": [
                {
                    "metric": {"node": "node-a", "cluster_id": "prod"},
                    "values": [[1700000004, "0.031"], [1700000306, "0.029"]],
                },
                {
                    "metric": {"node": "node-b", "cluster_id": "prod"},
                    "values": [[1700000004, "+Inf"], [1700000306, "0.052"]],
                },
            ],
        },
    }
)


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    decoder = ResponseDecoder(warning_sink=LoggingWarningSink())
    future = ResultFuture()

    producer = threading.Thread(
        target=publish_decoded, args=(future, QUERY, json.loads(BODY), decoder)
    )
    producer.start()

    try:
        series = future.result(timeout=10)
    except DecodeError:
        logger.exception("Query %s could not be decoded", QUERY)
        return
    finally:
        producer.join()

    for result in series:
        node = result.metric.get_string("node")
        total = sum(sample.value for sample in result.samples)
        logger.info("%s: %.3f over %d samples", node, total, len(result.samples))


if __name__ == "__main__":
    main()
