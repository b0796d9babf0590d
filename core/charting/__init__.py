"""Chart projection of the workout ledger.

The dashboard chart is produced through the `ChartRenderer` capability
interface so the controller never talks to Chart.js directly and tests can
substitute a fake.
"""
