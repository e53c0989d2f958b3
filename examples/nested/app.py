"""Nested — message namespaces composed with ``include()``.

A route graph and a set of renderers live under their own prefixes.
Renderer-specific messages sit one level deeper, under a numeric
renderer id captured from the address.

Run:
    python app.py
"""

from dataclasses import dataclass

from oscroute import Message, MessageSet

# -- /routegraph/... --

routegraph = MessageSet()


@routegraph.message("/add_node")
@dataclass(frozen=True, slots=True)
class AddNode(Message):
    pass


@routegraph.message("/add_edge")
@dataclass(frozen=True, slots=True)
class AddEdge(Message):
    pass


# -- /renderer/<id>/... --

renderer_by_id = MessageSet()


@renderer_by_id.message("/say")
@dataclass(frozen=True, slots=True)
class Say(Message):
    renderer: int


# -- /renderer/... --

renderer = MessageSet()


@renderer.message("/new")
@dataclass(frozen=True, slots=True)
class NewRenderer(Message):
    pass


@renderer.message("/del")
@dataclass(frozen=True, slots=True)
class DelRenderer(Message):
    pass


renderer.include(renderer_by_id, prefix="/{renderer:int}")

# -- top level --

toplevel = MessageSet()
toplevel.include(routegraph, prefix="/routegraph")
toplevel.include(renderer, prefix="/renderer")

router = toplevel.compile()


def handle(message: Message) -> str:
    match message:
        case AddNode(args=[node_id]):
            return f"Adding a node with id={node_id}"
        case AddEdge(args=[n1, n2]):
            return f"New edge from {n1}->{n2}"
        case Say(renderer=renderer_id, args=[text]):
            return f"id {renderer_id} says: {text}"
    return f"unhandled {message!r}"


if __name__ == "__main__":
    packet = router.to_datagram(Say(renderer=42, args=["HELLO, WORLD!"]))
    for msg in router.dispatch_datagram(packet):
        print(handle(msg))
