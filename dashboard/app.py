import streamlit as st
import httpx
import logging

from flywheel.config import app_config
from flywheel.domain.entities import IntentKind
from flywheel.services.intent import classify_intent

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Configuration
BACKEND_URL = app_config.BACKEND_URL

ASSISTANT_PROMPT = (
    "You are Flywheel, an A-share market assistant. "
    "Answer concisely and in a structured way, in the user's language."
)
NEWS_PROMPT = (
    "You are a careful A-share analyst. Using the headlines provided, extract the "
    "key points, cross-check them for consistency, and give a short conclusion "
    "with risk notes. Answer in the user's language."
)
WELCOME = "Hi, I'm Flywheel. Try \"今天消费板块行情\" or \"是否买入600519\"."

# Page config
st.set_page_config(
    page_title="Flywheel - Market Chat",
    page_icon="💬",
    layout="centered"
)

# Initialize session state
if "messages" not in st.session_state:
    st.session_state.messages = [{"role": "assistant", "content": WELCOME}]


# Sidebar
st.sidebar.title("💬 Flywheel")
st.sidebar.markdown("News, trend signals and market chat")


def call_llm(messages: list, temperature: float = 0.6) -> str:
    """Ask the backend chat proxy for a completion."""
    try:
        response = httpx.post(
            f"{BACKEND_URL}/api/llm",
            json={"messages": messages, "temperature": temperature},
            timeout=60.0
        )
        data = response.json()
        try:
            return data["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError):
            return data.get("error") or str(data)
    except Exception as e:
        logger.error(f"Error calling LLM: {e}")
        return f"Something went wrong: {e}"


def fetch_news(query: str):
    """Fetch aggregated news from API."""
    response = httpx.get(f"{BACKEND_URL}/api/news", params={"q": query}, timeout=30.0)
    return response.json()


def fetch_strategy(symbol: str):
    """Fetch trend signal from API."""
    response = httpx.get(f"{BACKEND_URL}/api/strategy", params={"symbol": symbol}, timeout=30.0)
    return response.json()


def handle_news(text: str) -> str:
    data = fetch_news(text)
    if data.get("error"):
        return f"News aggregation failed: {data['error']}"

    items = data.get("items", [])
    bullets = "\n\n".join(
        f"{i}. [{it['sourceDomain']}] {it['title']}\n{it['link']}"
        for i, it in enumerate(items, start=1)
    )
    prompt = (
        f"Topic: {text}\nHeadlines ({len(items)}):\n{bullets}\n\n"
        "Summarize the headlines above as:\n- Key points\n- Market impact\n"
        "- Risks\n- Sectors/stocks to watch (if clear)"
    )
    return call_llm([
        {"role": "system", "content": NEWS_PROMPT},
        {"role": "user", "content": prompt},
    ])


def format_signal(data: dict) -> str:
    def fmt(value) -> str:
        return f"{value:.2f}" if isinstance(value, (int, float)) else "n/a"

    trend = "up (price > SMA200)" if data["isUpTrend"] else "not up"
    return "\n".join([
        f"**Symbol:** {data['symbol']}",
        f"**Price:** {fmt(data['currentPrice'])}",
        f"**SMA200:** {fmt(data['sma200'])}",
        f"**Trend:** {trend}",
        f"**Last 7:** {', '.join(fmt(v) for v in data['recent7'])}",
        f"**Prior 6 low / high:** {fmt(data['minPrev6'])} / {fmt(data['maxPrev6'])}",
        f"**Signals:** low={data['signals']['isFirst7Low']}, high={data['signals']['isFirst7High']}",
        f"**Recommendation:** {data['recommendation']}",
        f"**Reason:** {data['explanation']}",
    ])


def handle_buy(symbol) -> str:
    if not symbol:
        return "Please give a 6-digit A-share code, e.g. 是否买入600519?"
    data = fetch_strategy(symbol)
    if data.get("error"):
        details = f" - {data['details']}" if data.get("details") else ""
        got = f" (got {data['got']} days)" if "got" in data else ""
        return f"Analysis failed: {data['error']}{got}{details}"
    return format_signal(data)


def handle_chat(text: str) -> str:
    return call_llm([
        {"role": "system", "content": ASSISTANT_PROMPT},
        {"role": "user", "content": text},
    ])


def respond(text: str) -> str:
    intent = classify_intent(text)
    try:
        if intent.kind == IntentKind.NEWS:
            return handle_news(text)
        if intent.kind == IntentKind.BUY:
            return handle_buy(intent.symbol)
        return handle_chat(text)
    except Exception as e:
        logger.error(f"Error handling message: {e}")
        return f"Something went wrong: {e}"


# Conversation
st.title("💬 Flywheel")

for message in st.session_state.messages:
    with st.chat_message(message["role"]):
        st.markdown(message["content"])

prompt = st.chat_input("Ask about news, a stock code, or anything else")
if prompt:
    st.session_state.messages.append({"role": "user", "content": prompt})
    with st.chat_message("user"):
        st.markdown(prompt)

    with st.chat_message("assistant"):
        with st.spinner("Working..."):
            reply = respond(prompt)
        st.markdown(reply)
    st.session_state.messages.append({"role": "assistant", "content": reply})

if st.sidebar.button("Clear conversation"):
    st.session_state.messages = [{"role": "assistant", "content": WELCOME}]
    st.rerun()


# Footer
st.sidebar.markdown("---")
st.sidebar.markdown("**Status**")
try:
    response = httpx.get(f"{BACKEND_URL}/healthz", timeout=5.0)
    if response.status_code == 200:
        st.sidebar.success("✅ Backend Online")
    else:
        st.sidebar.error("❌ Backend Offline")
except Exception:
    st.sidebar.error("❌ Backend Unreachable")
