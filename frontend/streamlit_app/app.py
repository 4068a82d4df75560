import os, requests, streamlit as st

API = os.getenv("API_URL", "http://localhost:8000/api/v1")

st.set_page_config(page_title="Taskdraft", layout="centered")
st.title("Taskdraft — Paste notes, get tasks")

PRIORITY_ICON = {"high": "🔴", "medium": "🟡", "low": "🟢"}

with st.form("parse"):
    text = st.text_area("Paste notes, a list, or meeting minutes:", height=200)
    use_ai = st.checkbox("Use the completion model when configured", value=True)
    col1, col2 = st.columns(2)
    preview = col1.form_submit_button("Preview")
    save = col2.form_submit_button("Parse & Save")

if preview or save:
    path = "/tasks/parse" if save else "/tasks/parse/preview"
    r = requests.post(f"{API}{path}", json={"text": text, "use_ai": use_ai})
    if r.ok:
        drafts = r.json()
        if not drafts:
            st.info("No tasks found.")
        for d in drafts:
            st.markdown(f"{PRIORITY_ICON.get(d['priority'], '')} **{d['title']}**")
            if d.get("description"):
                st.caption(d["description"])
    else:
        st.error(f"{r.status_code}: {r.text}")

st.subheader("All tasks")
if st.button("Refresh tasks"):
    r = requests.get(f"{API}/tasks")
    st.dataframe(
        [{k: t[k] for k in ("id", "title", "priority", "status", "created_at")} for t in r.json()],
        use_container_width=True,
    )
