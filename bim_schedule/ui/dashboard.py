"""Streamlit page to upload an interior photo and review its material schedule."""
import os
from pathlib import Path
from typing import List

import streamlit as st

# Allow running via "streamlit run bim_schedule/ui/dashboard.py" without installing the package
# by ensuring the repository root is on ``sys.path``.
if __package__ in {None, ""}:
    import sys

    sys.path.append(str(Path(__file__).resolve().parents[2]))

from bim_schedule.core.errors import InvalidImageError, MissingCredentialError, UpstreamUnavailableError
from bim_schedule.core.logging import configure_logging
from bim_schedule.core.models import MaterialRecord
from bim_schedule.core.utils import get_config_value, is_truthy
from bim_schedule.export.sinks import schedule_csv_bytes, schedule_excel_bytes
from bim_schedule.export.templates import clipboard_summary, materials_to_rows
from bim_schedule.ingestion.images import compress_image
from bim_schedule.processing.pipeline import generate_schedule
from bim_schedule.quality import quality_report

SECRET_KEYS = ("OPENAI_API_KEY", "OPENAI_MODEL", "DEMO_MODE")


def _apply_secrets() -> None:
    """Expose Streamlit secrets to the vision client through the environment."""

    for key in SECRET_KEYS:
        value = get_config_value(key)
        if value and key not in os.environ:
            os.environ[key] = value


def _rerun_app() -> None:
    """Trigger a Streamlit rerun, compatible with newer and older APIs."""

    rerun = getattr(st, "rerun", None) or getattr(st, "experimental_rerun", None)
    if not rerun:
        raise RuntimeError("Streamlit does not expose a rerun helper.")
    rerun()


def _generate(upload) -> None:
    """Compress the uploaded photo, call the model, and store the schedule in session."""

    try:
        compressed = compress_image(upload.getvalue(), upload.type)
        with st.spinner("Analysing materials..."):
            materials = generate_schedule(compressed.data, compressed.mime_type)
    except InvalidImageError as exc:
        st.session_state.schedule_error = f"Could not read that image: {exc}"
        return
    except MissingCredentialError:
        st.session_state.schedule_error = "OpenAI API key not configured."
        return
    except UpstreamUnavailableError as exc:
        st.session_state.schedule_error = f"Failed to generate materials: {exc}"
        return

    st.session_state.schedule_error = None
    st.session_state.materials = materials


def _schedule_table(materials: List[MaterialRecord]) -> None:
    """Render the schedule with download and copy helpers."""

    rows = materials_to_rows(materials)
    st.dataframe(
        rows,
        use_container_width=True,
        hide_index=True,
        column_config={
            "Price per sqm (Low)": st.column_config.NumberColumn(format="£%d"),
            "Price per sqm (Mid)": st.column_config.NumberColumn(format="£%d"),
            "Price per sqm (High)": st.column_config.NumberColumn(format="£%d"),
        },
    )

    download_cols = st.columns([1, 1, 4])
    with download_cols[0]:
        st.download_button(
            "⬇ Export CSV",
            schedule_csv_bytes(rows),
            file_name="bim-materials.csv",
            mime="text/csv",
            use_container_width=True,
        )
    with download_cols[1]:
        st.download_button(
            "⬇ Excel",
            schedule_excel_bytes(rows),
            file_name="bim-materials.xlsx",
            mime="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
            use_container_width=True,
        )

    with st.expander("Copy as text", expanded=False):
        st.caption("Use the copy icon in the corner of the block below.")
        st.code(clipboard_summary(materials), language=None)


def _category_overview(materials: List[MaterialRecord]) -> None:
    counts: dict[str, int] = {}
    for material in materials:
        counts[material.category_prefix] = counts.get(material.category_prefix, 0) + 1
    st.bar_chart(
        [{"Category": prefix, "Materials": count} for prefix, count in sorted(counts.items())],
        x="Category",
        y="Materials",
    )


def main() -> None:
    """Launch the upload and schedule page."""

    configure_logging()
    st.set_page_config(page_title="BIM Material Schedule", layout="wide")
    _apply_secrets()

    st.title("BIM Material Schedule")
    st.caption("Upload a photo of an interior to draft a material schedule with suppliers and price ranges.")

    if is_truthy(os.getenv("DEMO_MODE")):
        st.info("🎭 Demo mode: sample materials are returned without calling the model.")
    elif not os.getenv("OPENAI_API_KEY"):
        st.error("⚠️ OPENAI_API_KEY not found! Generation will fail. Please configure secrets.")

    st.session_state.setdefault("materials", [])
    st.session_state.setdefault("schedule_error", None)

    upload_col, preview_col = st.columns([1, 1])
    with upload_col:
        upload = st.file_uploader("Interior photo", type=["jpg", "jpeg", "png", "webp"])
        generate_clicked = st.button("Generate Materials", type="primary", disabled=upload is None)
        if st.button("Clear", type="secondary"):
            st.session_state.materials = []
            st.session_state.schedule_error = None
            _rerun_app()
    with preview_col:
        if upload is not None:
            st.image(upload, caption=upload.name, use_container_width=True)

    if generate_clicked and upload is not None:
        _generate(upload)

    if st.session_state.schedule_error:
        st.error(st.session_state.schedule_error)

    materials: List[MaterialRecord] = st.session_state.materials
    st.markdown("### Schedule")
    if materials:
        _schedule_table(materials)
    else:
        st.info('No materials generated yet. Upload an image and click "Generate Materials" to get started.')

    with st.sidebar:
        st.subheader("Summary")
        st.metric("Materials", len(materials))
        if materials:
            _category_overview(materials)
        st.subheader("Alerts")
        report = quality_report(materials)
        if report:
            st.dataframe(
                [{"Code": code, "Issue": "; ".join(issues)} for code, issues in report.items()],
                use_container_width=True,
                hide_index=True,
            )
        else:
            st.success("No alerts for the current schedule.")


if __name__ == "__main__":
    main()
