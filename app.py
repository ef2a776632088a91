import logging
import streamlit as st
from core.analysis import AnalysisCancelled
from core.logs import setup_logging, log_usage
from core.registry import load_config, load_enabled_modules
from core.pdf_parser import parse_pdf
from core.report import build_pdf
from core.state import AppState, get_state

cfg = load_config()
setup_logging(cfg)
log = logging.getLogger("app")

TITLE = cfg["app"]["title"]
DELAY = float(cfg["app"]["analysis_delay_seconds"])

st.set_page_config(page_title=TITLE, layout="wide")
st.title(TITLE)
st.caption("Rule-based early detection and risk assessment")

state = get_state()


def _start(s: AppState):
    s.start_analysis(DELAY)


def _analyze(mod, s: AppState):
    bar = st.progress(0.0, text="Processing patient data...")
    st.caption("Our model is analyzing liver function parameters")
    snapshot = s.patient
    try:
        result = s.job.run(snapshot, mod.compute, on_progress=lambda p: bar.progress(p, text="Processing patient data..."))
    except AnalysisCancelled:
        log.info("session=%s analysis cancelled", s.session_id)
        s.abort_analysis()
    else:
        s.finish_analysis(result, snapshot)
        log_usage(s.session_id, mod.id, snapshot.as_dict(), {"risk": result.risk.value, "score": result.score})
    st.rerun()


# 1) Parse PDF once (optional)
parsed = parse_pdf()

# 2) Load enabled modules
modules = load_enabled_modules(cfg)

for mod in modules:
    if parsed.values and st.session_state.get("_applied_pdf") != parsed.values:
        mod.prefill(parsed.values)
        st.session_state["_applied_pdf"] = parsed.values

    left, right = st.columns(2)
    with left:
        st.subheader("Patient Information")
        state.edit(**mod.inputs(state.patient).as_dict())
        st.button("Analyze Risk", key=f"{mod.id}_analyze", disabled=state.analyzing,
                  on_click=_start, args=(state,))
    with right:
        st.subheader("Prediction Results")
        if state.analyzing and state.job is not None:
            _analyze(mod, state)
        mod.render(state.result)
        if state.result is not None:
            # 3) PDF report of the analysed inputs and result
            scored = state.analyzed or state.patient
            pdf_bytes = build_pdf(patient=scored, rows=mod.to_pdf(scored), result=state.result)
            st.download_button("Download PDF Report", data=pdf_bytes, file_name="cirrhosis_report.pdf", mime="application/pdf")

# 4) Information cards
c1, c2, c3 = st.columns(3)
with c1:
    st.markdown("#### Rule-Based Analysis")
    st.write("Multiple biomarkers are checked against fixed thresholds to estimate cirrhosis risk.")
with c2:
    st.markdown("#### Early Detection")
    st.write("Enable early intervention and personalised follow-up through routine liver panels.")
with c3:
    st.markdown("#### Better Outcomes")
    st.write("Support patient conversations with a clear, structured summary of liver function results.")

st.caption("Disclaimer: Screening & education only. Not medical advice.")
