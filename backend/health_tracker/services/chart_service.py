"""
Chart Service

Renders the weight / waist progress chart from canonical (kg / cm) records.
"""

import matplotlib
matplotlib.use('Agg')  # Use non-interactive backend
import matplotlib.pyplot as plt
import matplotlib.dates as mdates
import seaborn as sns
from datetime import datetime
from io import BytesIO
from typing import List

from health_tracker.models.health_entry_record import HealthEntryRecord

MEASUREMENT_FILTERS = ['weight', 'waist', 'all']

WEIGHT_COLOR = '#3B82F6'
WAIST_COLOR = '#EF4444'


class ChartService:
    """Service for generating health progress charts."""

    @staticmethod
    def generate_progress_chart(
        records: List[HealthEntryRecord],
        measurement_filter: str = 'all'
    ) -> bytes:
        """
        Generate a line chart of weight and/or waist over time.

        Args:
            records: Canonical records, oldest first
            measurement_filter: 'weight', 'waist' or 'all'

        Returns:
            PNG image as bytes
        """
        if measurement_filter not in MEASUREMENT_FILTERS:
            raise ValueError(
                f"Invalid measurement_filter. Valid: {', '.join(MEASUREMENT_FILTERS)}"
            )

        if not records:
            return ChartService._generate_no_data_chart(
                "Start logging your progress to see your chart"
            )

        date_objs = [datetime.combine(r.date, datetime.min.time()) for r in records]
        weights = [r.weight for r in records]
        waists = [r.waist for r in records]

        with sns.axes_style('whitegrid'):
            fig, ax = plt.subplots(figsize=(12, 7))

            lines = []
            if measurement_filter in ('weight', 'all'):
                lines += ax.plot(date_objs, weights, 'o-', color=WEIGHT_COLOR,
                                 label='Weight (kg)', linewidth=2, markersize=6)
                ax.set_ylabel('Weight (kg)', fontsize=13, fontweight='bold', labelpad=10)

            if measurement_filter == 'all':
                # Waist gets its own axis so both series keep a readable scale
                waist_ax = ax.twinx()
                waist_ax.grid(False)
                waist_ax.set_ylabel('Waist (cm)', fontsize=13, fontweight='bold', labelpad=10)
            else:
                waist_ax = ax

            if measurement_filter in ('waist', 'all'):
                lines += waist_ax.plot(date_objs, waists, 'o-', color=WAIST_COLOR,
                                       label='Waist (cm)', linewidth=2, markersize=6)
                if measurement_filter == 'waist':
                    ax.set_ylabel('Waist (cm)', fontsize=13, fontweight='bold', labelpad=10)

            ax.set_xlabel('Date', fontsize=13, fontweight='bold', labelpad=10)
            ax.set_title('Health Progress', fontsize=15, fontweight='bold', pad=20)
            ax.legend(handles=lines, loc='upper center', bbox_to_anchor=(0.5, 1.1),
                      ncol=len(lines), fontsize=11, framealpha=0.9)

            ax.xaxis.set_major_formatter(mdates.DateFormatter('%Y-%m-%d'))
            ax.xaxis.set_major_locator(mdates.AutoDateLocator())
            fig.autofmt_xdate(rotation=45, ha='right')

            plt.tight_layout()

            # Save to bytes
            with BytesIO() as buffer:
                fig.savefig(buffer, format='png', dpi=100, bbox_inches='tight')
                image_data = buffer.getvalue()

            plt.close(fig)

        return image_data

    @staticmethod
    def _generate_no_data_chart(message: str) -> bytes:
        """Generate a placeholder chart when no data is available."""
        fig, ax = plt.subplots(figsize=(10, 6))
        ax.text(0.5, 0.5, message,
                horizontalalignment='center',
                verticalalignment='center',
                fontsize=14, color='gray',
                transform=ax.transAxes)
        ax.axis('off')

        buffer = BytesIO()
        plt.savefig(buffer, format='png', dpi=100, bbox_inches='tight')
        buffer.seek(0)
        plt.close(fig)

        return buffer.getvalue()
