"""
Feeding a fixed batch of HTTP-style requests through a pushflow stream.

Run with ``--verbose`` to see the stream's own debug records.
"""

import argparse
import logging
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum, IntEnum
from typing import Dict, List, Optional

from rich.console import Console

from pushflow import Observable, StreamError, describe_error

console = Console()


class Method(str, Enum):
    POST = "POST"
    GET = "GET"


class Status(IntEnum):
    OK = 200
    INTERNAL_SERVER_ERROR = 500


@dataclass
class User:
    name: str
    age: int
    roles: List[str]
    created_at: datetime = field(default_factory=datetime.now)
    is_deleted: bool = False


@dataclass
class Request:
    method: Method
    host: str
    path: str
    params: Dict[str, str] = field(default_factory=dict)
    body: Optional[User] = None


@dataclass
class Response:
    status: Status
    detail: str = ""


USER = User(name="User Name", age=26, roles=["user", "admin"])

REQUESTS = [
    Request(method=Method.POST, host="service.example", path="user", body=USER),
    Request(
        method=Method.GET,
        host="service.example",
        path="user",
        params={"id": "3f5h67s4s"},
    ),
]


def handle_request(request: Request) -> Response:
    console.print(
        f"[cyan]{request.method.value}[/cyan] {request.host}/{request.path} {request.params or ''}"
    )
    return Response(Status.OK)


def handle_error(error: StreamError) -> Response:
    kind, message = describe_error(error)
    console.print(f"[red]{kind}[/red]: {message}")
    return Response(Status.INTERNAL_SERVER_ERROR, detail=message)


def handle_complete() -> None:
    console.print("[green]complete[/green]")


def failing_requests(requests: List[Request]) -> Observable:
    """Emit ``requests`` then fail instead of completing."""

    def produce(observer):
        for request in requests:
            observer.next(request)
        observer.error(StreamError("upstream closed", kind="ConnectionReset"))
        return None

    return Observable(produce)


def main():
    parser = argparse.ArgumentParser(description="pushflow request stream demo")
    parser.add_argument(
        "--verbose", action="store_true", help="Log stream internals at DEBUG level"
    )
    parser.add_argument(
        "--fail", action="store_true", help="End the stream with an error"
    )
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    requests = failing_requests(REQUESTS) if args.fail else Observable.from_(REQUESTS)

    subscription = requests.subscribe(
        {
            "next": handle_request,
            "error": handle_error,
            "complete": handle_complete,
        }
    )

    subscription.unsubscribe()


if __name__ == "__main__":
    main()
