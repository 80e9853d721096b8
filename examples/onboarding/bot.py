"""Onboarding bot built in code.

Mirrors graph.yaml. welcome links forward to plans before plans exists,
and plans links back to welcome, so the graph has a cycle.

Run:
    python examples/onboarding/bot.py
"""

from dcgraph import GET_STARTED_PAYLOAD, GraphHandlerBuilder, RecordingContext, derive_key
from dcgraph.observability import setup_logging


def build_handler():
    builder = GraphHandlerBuilder()
    plans = builder.ref("plans")

    welcome = builder.create_node(
        "welcome",
        [
            ("text", "Hi! I can help you find a plan."),
            (
                "button_template",
                "What would you like to do?",
                None,
                [{"type": "postback", "title": "See plans", "transition_to": plans}],
            ),
        ],
    )
    basic = builder.create_node(
        "basic",
        [("text", "Basic costs $5 per month.")],
    )
    builder.create_node(
        "plans",
        [
            (
                "quick_replies",
                "Pick a plan",
                None,
                None,
                [
                    {"content_type": "text", "title": "Basic", "transition_to": lambda: basic},
                    {"content_type": "text", "title": "Start over", "transition_to": lambda: welcome},
                ],
            ),
        ],
    )

    def greet(context, message):
        context.send_text("Welcome aboard!")

    def log_unhandled(context, message):
        print(f"unhandled hook: {message}")

    return builder.on_get_started(greet).on_unhandled(log_unhandled).build(RecordingContext)


if __name__ == "__main__":
    setup_logging("DEBUG")
    handler = build_handler()

    context = RecordingContext()
    handler(context, {"postback": {"payload": GET_STARTED_PAYLOAD}})
    handler(context, {"postback": {"payload": derive_key("welcome")}})
    handler(context, {"message": {"quick_reply": {"payload": derive_key("plans")}}})

    for call in context.calls:
        print(call.operation, call.args)
