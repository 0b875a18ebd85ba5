"""Interactive conversation against a live Assistant workspace.

Each turn re-submits the context of the previous response, which is how the
dialog keeps its state between turns.

Requires ASSISTANT_VERSION_DATE plus credentials (ASSISTANT_APIKEY or
ASSISTANT_USERNAME/ASSISTANT_PASSWORD or ASSISTANT_IAM_ACCESS_TOKEN) in the
environment or .env.

Usage:
    python scripts/assistant_conversation.py <workspace_id>
"""

import asyncio
import logging
import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from models.message import MessageRequest, MessageResponse  # noqa: E402
from models.runtime import MessageInput  # noqa: E402
from services.assistant import get_assistant_service  # noqa: E402
from services.http_transport import get_http_transport  # noqa: E402


async def send_turn(workspace_id: str, request: MessageRequest) -> MessageResponse:
    """Send one message and wait for whichever continuation fires."""
    loop = asyncio.get_running_loop()
    result: asyncio.Future = loop.create_future()

    def on_success(response, custom_data):
        result.set_result(response)

    def on_fail(error, custom_data):
        result.set_exception(error)

    get_assistant_service().message(on_success, on_fail, workspace_id, request)
    return await result


async def main(workspace_id: str) -> None:
    context = None
    try:
        while True:
            text = input("you> ").strip()
            if text in ("quit", "exit"):
                break
            request = MessageRequest(input=MessageInput(text=text), context=context)
            response = await send_turn(workspace_id, request)
            context = response.context

            for line in (response.output.text if response.output else None) or []:
                print(f"bot> {line}")
            if response.intents:
                top = response.intents[0]
                print(f"     #{top.intent} ({top.confidence:.2f})")
    except (EOFError, KeyboardInterrupt):
        print()
    finally:
        await get_http_transport().close()


if __name__ == "__main__":
    if len(sys.argv) != 2:
        print(__doc__)
        sys.exit(1)
    logging.basicConfig(level=logging.WARNING)
    asyncio.run(main(sys.argv[1]))
