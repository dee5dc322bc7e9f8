"""Application configuration via environment variables."""

import os
from dotenv import load_dotenv

load_dotenv()

APP_VERSION = "1.0.0"

# AI gateway (OpenAI-compatible chat completions endpoint)
AI_GATEWAY_API_KEY = os.getenv("AI_GATEWAY_API_KEY", os.getenv("LOVABLE_API_KEY", ""))
AI_GATEWAY_BASE_URL = os.getenv("AI_GATEWAY_BASE_URL", "https://ai.gateway.lovable.dev/v1")
AI_TEXT_MODEL = os.getenv("AI_TEXT_MODEL", "google/gemini-2.5-flash")
AI_IMAGE_MODEL = os.getenv("AI_IMAGE_MODEL", "google/gemini-2.5-flash-image")
AI_TEMPERATURE = float(os.getenv("AI_TEMPERATURE", "0.7"))
AI_MAX_TOKENS = int(os.getenv("AI_MAX_TOKENS", "2048"))

# Groq API (chat only, used when the gateway is not configured)
GROQ_API_KEY = os.getenv("GROQ_API_KEY", "")
GROQ_MODEL = os.getenv("GROQ_MODEL", "llama-3.3-70b-versatile")

# Plot gating and scene constants
MIN_BUILT_UP_AREA = float(os.getenv("MIN_BUILT_UP_AREA", "500"))  # sq ft
SCENE_SCALE = float(os.getenv("SCENE_SCALE", "0.03"))  # scene units per foot
ROOM_HEIGHT = float(os.getenv("ROOM_HEIGHT", "2.5"))  # scene units

# Server
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "8000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# CORS
CORS_ORIGINS = os.getenv("CORS_ORIGINS", "http://localhost:5173,http://localhost:8080").split(",")
