# ui/app.py
# Run: streamlit run ui/app.py   (the API must be up, see AGRI_API_URL)
import streamlit as st

from ui.api_client import YieldApiClient
from ui.charts import build_figures
from ui.data import DISTRICTS, LANGUAGES, SEASONS, crops_for, strings
from ui.form import FormSession, SubmissionInProgress

st.set_page_config(page_title="Crop Yield Prediction", page_icon="🌾", layout="wide")

if "form" not in st.session_state:
    st.session_state.form = FormSession(YieldApiClient.from_env())
form: FormSession = st.session_state.form

language = st.sidebar.selectbox("Language", list(LANGUAGES), format_func=LANGUAGES.get)
t = strings(language)

st.title(t["predictionForm"])
st.caption("Get AI-powered crop predictions and expert advice")

left, right = st.columns(2)

# -----------------------------
# Farm details form
# -----------------------------
with left:
    st.subheader("🌾 Enter Farm Details")
    c1, c2 = st.columns(2)
    district = c1.selectbox(
        f"📍 {t['district']}", [""] + DISTRICTS, format_func=lambda d: d or "Select district"
    )
    year = c2.number_input(f"📅 {t['year']}", min_value=1990, max_value=2100, value=form.data.year, step=1)
    season = c1.selectbox(
        f"🌤️ {t['season']}", [""] + SEASONS, format_func=lambda s: s or "Select season"
    )
    form.update(district=district, year=int(year), season=season)
    crops = [""] + crops_for(form.data.season)

    form.show_sub_plots = st.checkbox("Divide field into multiple crops", value=form.show_sub_plots)

    if not form.show_sub_plots:
        crop = c2.selectbox(
            f"🌿 {t['crop']}", crops, format_func=lambda c: c or "Select crop",
            disabled=not form.data.season,
        )
        area = st.number_input(
            f"📐 {t['area']} (hectares)", min_value=0.0, value=None, placeholder="Enter area in hectares"
        )
        form.update(crop=crop or "", area="" if area is None else area)
    else:
        st.markdown("**🌾 Sub-plots Division**")
        # widgets are keyed by plot id so removing a plot does not shift state
        for i, plot in enumerate(list(form.data.sub_plots)):
            p1, p2, p3 = st.columns([3, 3, 1])
            plot_crop = p1.selectbox(
                "Crop", crops, key=f"plot_crop_{plot.id}", format_func=lambda c: c or "Select crop",
                label_visibility="collapsed",
            )
            plot_area = p2.number_input(
                "Area (ha)", min_value=0.0, value=None, key=f"plot_area_{plot.id}",
                placeholder="Area (ha)", label_visibility="collapsed",
            )
            form.update_sub_plot(i, crop=plot_crop or "", area="" if plot_area is None else plot_area)
            if len(form.data.sub_plots) > 1 and p3.button("❌", key=f"remove_plot_{plot.id}"):
                removed = form.remove_sub_plot(i)
                for key in (f"plot_crop_{removed.id}", f"plot_area_{removed.id}"):
                    st.session_state.pop(key, None)
                st.rerun()
        if st.button("+ Add another crop"):
            form.add_sub_plot()
            st.rerun()

    if form.error:
        st.error(form.error)
        if st.button("Dismiss", key="dismiss_error"):
            form.dismiss_error()
            st.rerun()

    if st.button(f"🤖 {t['getYield']}", disabled=not form.can_submit, use_container_width=True):
        with st.spinner("Analyzing with AI..."):
            try:
                form.submit()
            except SubmissionInProgress as e:
                st.warning(str(e))
        st.rerun()

# -----------------------------
# Results
# -----------------------------
with right:
    result = form.result
    if result:
        st.subheader("📈 Prediction Results")
        st.metric("Predicted Yield", f"{result.predicted_yield} {t['yieldUnit']}")
        st.markdown(
            f"📊 {t['comparativeYield']}: **+{result.comparative_percentage}%** above average"
        )
        st.caption(f"Total Area: {result.total_area:g} hectares")
        if result.sub_plot_results:
            st.markdown("**Sub-plot Breakdown:**")
            for plot in result.sub_plot_results:
                st.write(f"{plot['crop']}: {plot['area']:g} ha")

        st.subheader("💡 AI-Powered Advice")
        st.info(result.advice_for(language))

# -----------------------------
# Analytics (mock data)
# -----------------------------
st.header("📊 Farm Analytics & Trends")
for col, fig in zip(st.columns(3), build_figures(language).values()):
    col.pyplot(fig, clear_figure=True)
