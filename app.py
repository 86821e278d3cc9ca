import pandas as pd
import streamlit as st

from voterlookup.config import get_config
from voterlookup.exceptions import VoterLookupError
from voterlookup.models import VoterStatus
from voterlookup.persistence import open_source
from voterlookup.search import VoterListSearch

st.set_page_config(page_title="Voter Lookup", layout="wide")

st.title("🗳️ Voter Lookup")

config = get_config()
source = st.sidebar.text_input(
    "Voter source (JSON or CSV)",
    value=str(config.default_source_path or ""),
)

if not source:
    st.info("Set a voter source to begin.")
    st.stop()


@st.cache_resource
def load_repository(path):
    return open_source(path)


try:
    repo = load_repository(source)
except VoterLookupError as e:
    st.error(str(e))
    st.stop()

booths = repo.list_booths()
if not booths:
    st.warning("No booths in this source.")
    st.stop()

booth = st.sidebar.selectbox(
    "Booth",
    options=booths,
    format_func=lambda b: f"{b.booth_no}. {b.name}" if b.booth_no is not None else b.name,
)

status = st.sidebar.selectbox(
    "Status",
    options=["all"] + [s.value for s in VoterStatus],
    format_func=lambda s: "All" if s == "all" else VoterStatus(s).label,
)

# ------------------------------------------------------------------
# One search handle per session; rebuilt when the source or booth changes
# ------------------------------------------------------------------

loaded_key = (source, booth.id)
if st.session_state.get("loaded_key") != loaded_key:
    search = VoterListSearch.for_voter_list(config=config.search)
    search.load(repo.fetch_voters(booth.id))
    st.session_state["search"] = search
    st.session_state["loaded_key"] = loaded_key

search = st.session_state["search"]
search.status_filter = status

ward = repo.get_ward(booth.ward_id)
panchayat = repo.get_panchayat(ward.panchayat_id) if ward else None

st.caption(booth.breadcrumb(ward, panchayat))
st.subheader(booth.name)
st.write(f"**Total voters: {len(search)}**")

term = st.text_input("Search by name, ID card, house name or serial number")
voters = search.search(term)

if not voters:
    st.write(f'No voters found for "{term}"')
    st.stop()

df = pd.DataFrame([v.to_dict() for v in voters])
columns = ["sl_no", "name", "guardian_name", "house_no", "house_name", "id_card_no", "age", "gender", "status"]


def highlight_struck_off(row):
    if row["status"] in (VoterStatus.SHIFTED.value, VoterStatus.DELETED.value):
        return ["background-color: #FEE2E2"] * len(row)
    return [""] * len(row)


st.dataframe(
    df[columns].style.apply(highlight_struck_off, axis=1),
    use_container_width=True,
    hide_index=True,
)
