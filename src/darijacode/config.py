import os
from dotenv import load_dotenv

load_dotenv()

# --- Completion provider ---
LLM_PROVIDER = os.getenv("LLM_PROVIDER", "groq").lower()
GROQ_MODEL = os.getenv("GROQ_MODEL", "llama3-70b-8192")
GEMINI_MODEL = os.getenv("MODEL_2", "gemini-flash-lite-latest")

# --- Speech transcription ---
HF_ASR_URL = os.getenv(
    "HF_ASR_URL",
    "https://api-inference.huggingface.co/models/openai/whisper-large-v3",
)

# --- Local durable storage ---
STORE_DIR = os.getenv("DARIJACODE_STORE_DIR", ".darijacode")

# Delay before a generated forum reply is shown, to simulate the assistant "thinking"
AI_REPLY_DELAY_SECONDS = float(os.getenv("AI_REPLY_DELAY_SECONDS", "2.0"))

AI_AUTHOR = "AI Assistant"
USERNAME_MAX_LENGTH = 20
