"""
Demo Data Seeder

Populates the "demo" tenant with a small team and a set of hospital accounting
tasks spread across the workflow stages.
"""
import logging
import random

from sqlmodel import Session, select

from has_status.core.config import settings
from has_status.models.task import Task
from has_status.models.team import TeamMember
from has_status.models.project import Project, WhiteboardState, SINGLETON_ID

logger = logging.getLogger(__name__)

STAGES = ["Outstanding", "Review/Discussion", "In Process", "Resolved"]

DEMO_TEAM = [
    {"username": "Alice Johnson", "email": "alice.johnson@demo.com", "org": "PHG"},
    {"username": "Bob Smith", "email": "bob.smith@demo.com", "org": "PHG"},
    {"username": "Carol Lee", "email": "carol.lee@demo.com", "org": "PHG"},
    {"username": "David Kim", "email": "david.kim@demo.com", "org": "PHG"},
]

DEMO_TASKS = [
    ("General Ledger Review", "Audit the hospital's existing general ledger to verify account balances, identify errors, and ensure GAAP compliance.", "One-Time"),
    ("Accrual Process Assessment", "Evaluate current accrual methods for revenue (e.g., unbilled patient services) and expenses (e.g., utilities, salaries) for accuracy and consistency.", "One-Time"),
    ("Chart of Accounts Validation", "Review and align the hospital's chart of accounts to ensure proper categorization for journal entries and financial reporting.", "One-Time"),
    ("Prior Period Entry Analysis", "Examine historical journal entries to identify recurring issues or misclassifications, preparing correcting entries as needed.", "One-Time"),
    ("Financial Statement Baseline Review", "Assess prior financial statements (balance sheet, income statement, cash flow statement) to establish a baseline for ongoing preparation and ensure compliance with GAAP and HIPAA.", "One-Time"),
    ("Revenue Accrual Entries", "Post journal entries for accrued revenue from unbilled patient services, using patient encounter data and estimated insurance reimbursements.", "Weekly"),
    ("Expense Accrual Entries", "Record accrued expenses for incurred but unpaid costs (e.g., utilities, vendor services) based on historical data or pending invoices.", "Weekly"),
    ("Cash Receipt Journal Entries", "Log journal entries for cash receipts from patients or insurers, debiting cash and crediting revenue or accounts receivable.", "Weekly"),
    ("Preliminary Journal Review", "Review weekly journal entries for correct account coding, completeness, and supporting documentation (e.g., payment records).", "Weekly"),
    ("Adjusting Entry Corrections", "Prepare and post adjusting entries to correct errors or discrepancies identified during weekly general ledger reviews.", "Weekly"),
    ("Month-End Accrual Finalization", "Finalize and post accrual entries for revenue (e.g., unbilled procedures, pending claims) and expenses (e.g., salaries, leases) to align with GAAP.", "Monthly"),
    ("Depreciation Journal Entries", "Record monthly depreciation entries for hospital assets (e.g., medical equipment, facilities) using established schedules.", "Monthly"),
    ("Prepaid Expense Amortization", "Post journal entries to amortize prepaid expenses (e.g., insurance, software licenses) over their applicable periods.", "Monthly"),
    ("Financial Statement Preparation", "Prepare monthly financial statements (balance sheet, income statement, cash flow statement) using journal entry data, ensuring accuracy and GAAP compliance.", "Monthly"),
    ("Comprehensive Ledger and Financial Review", "Conduct a detailed review of all monthly journal entries and financial statements, verifying accuracy, accrual integrity, and compliance with GAAP and HIPAA.", "Monthly"),
    ("Accrual Reversal Entries", "Post reversing entries for prior month's accruals (e.g., paid invoices, settled claims) to prevent double-counting in the ledger.", "Monthly"),
]


def seed_demo_data(db: Session) -> None:
    """
    Fill the demo tenant. Team, project and whiteboard are only created when
    missing; demo tasks are always replaced.
    """
    client_id = settings.DEFAULT_CLIENT_ID

    team = list(db.exec(select(TeamMember).where(TeamMember.clientId == client_id)).all())
    if not team:
        team = [TeamMember(clientId=client_id, **member) for member in DEMO_TEAM]
        db.add_all(team)
        db.commit()
        logger.info("Demo team seeded")

    for task in db.exec(select(Task).where(Task.clientId == client_id)).all():
        db.delete(task)
    names = [member.username for member in team]
    for i, (goal, comments, execute) in enumerate(DEMO_TASKS):
        stage = random.choice(STAGES)
        db.add(Task(
            clientId=client_id,
            phase=stage,
            stage=stage,
            goal=goal,
            need="",
            comments=comments,
            execute=execute,
            commentArea="",
            assigned_to=names[i % len(names)] if names else "team",
        ))
    db.commit()
    logger.info("All demo phases seeded: %d tasks", len(DEMO_TASKS))

    if not db.get(Project, SINGLETON_ID):
        db.add(Project(id=SINGLETON_ID, name=""))
        db.commit()
        logger.info("Demo project seeded")

    if not db.get(WhiteboardState, SINGLETON_ID):
        db.add(WhiteboardState(id=SINGLETON_ID, state_json={}))
        db.commit()
        logger.info("Demo whiteboard state seeded")


def reset_demo_data(db: Session) -> None:
    """Wipe tasks, team and singletons, then seed again. Clients and audit entries are kept."""
    for model in (TeamMember, Task, Project, WhiteboardState):
        for row in db.exec(select(model)).all():
            db.delete(row)
    db.commit()
    seed_demo_data(db)


def seed_if_empty(db: Session) -> bool:
    """Startup hook: seed only when the demo tenant has neither team nor tasks."""
    client_id = settings.DEFAULT_CLIENT_ID
    has_team = db.exec(select(TeamMember).where(TeamMember.clientId == client_id)).first()
    has_tasks = db.exec(select(Task).where(Task.clientId == client_id)).first()
    if has_team or has_tasks:
        return False
    seed_demo_data(db)
    return True
