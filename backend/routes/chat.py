"""Construction assistant chat routes (HTTP and WebSocket)."""

import json
import logging

from fastapi import APIRouter, WebSocket, WebSocketDisconnect

from errors import DigitalBuildError
from schemas import ChatRequest, ChatResponse, ERROR_RESPONSES
from services.chat import chat_reply

logger = logging.getLogger(__name__)

router = APIRouter(tags=["chat"], responses=ERROR_RESPONSES)


@router.post("/api/chat", response_model=ChatResponse)
async def chat_http(request: ChatRequest):
    """Reply to the last user message of the transcript."""
    reply = await chat_reply([m.model_dump() for m in request.messages])
    return ChatResponse(response=reply)


@router.websocket("/api/chat/ws")
async def chat_websocket(websocket: WebSocket):
    """
    WebSocket chat. Each frame is {"message": "..."}; the transcript lives
    only as long as the connection.
    """
    await websocket.accept()

    history = []

    try:
        while True:
            data = await websocket.receive_text()
            try:
                message = json.loads(data)
            except json.JSONDecodeError:
                await websocket.send_text(json.dumps({"error": "Invalid JSON message"}))
                continue

            user_text = str(message.get("message", "")).strip() if isinstance(message, dict) else ""
            if not user_text:
                continue

            try:
                reply = await chat_reply(history + [{"role": "user", "content": user_text}])
            except DigitalBuildError as e:
                logger.warning("Chat reply failed: %r", e)
                await websocket.send_text(json.dumps(e.to_dict()))
                continue

            history.append({"role": "user", "content": user_text})
            history.append({"role": "assistant", "content": reply})

            await websocket.send_text(json.dumps({"response": reply}))

    except WebSocketDisconnect:
        logger.debug("Chat websocket closed after %d messages", len(history))
