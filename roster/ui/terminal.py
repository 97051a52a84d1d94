"""
Terminal Display Implementation.

This module handles all console/terminal output formatting.
It's the ONLY place where printing happens in the roster package.

To create a different UI (web, PDF, etc.), create a new class with
the same method signatures but different output handling.
"""

from ..models import (
    ClassEnrollment,
    EnrollmentTotals,
    ExpirationReport,
    ExpiringItem,
    DisplaySettings,
    Student,
)


class TerminalDisplay:
    """
    Pretty terminal output for roster reports.

    Every method takes plain data produced by the engines; nothing here
    classifies students or parses dates beyond formatting.
    """

    # ANSI color codes for terminal styling
    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    RED = "\033[91m"
    BLUE = "\033[94m"
    CYAN = "\033[96m"
    MAGENTA = "\033[95m"
    WHITE = "\033[97m"

    BG_GREEN = "\033[42m"
    BG_YELLOW = "\033[43m"
    BG_RED = "\033[41m"

    @classmethod
    def print_header(cls, title: str):
        """Print a major section header with decorative borders."""
        width = 70
        print()
        print(f"{cls.BOLD}{cls.CYAN}{'═' * width}{cls.RESET}")
        print(f"{cls.BOLD}{cls.CYAN}  {title}{cls.RESET}")
        print(f"{cls.BOLD}{cls.CYAN}{'═' * width}{cls.RESET}")

    @classmethod
    def print_subheader(cls, title: str):
        """Print a subsection header."""
        print()
        print(f"{cls.BOLD}{cls.WHITE}  ── {title} ──{cls.RESET}")

    @classmethod
    def print_error(cls, message: str):
        print(f"\n  {cls.RED}Error: {message}{cls.RESET}")

    @classmethod
    def capacity_badge(cls, row: ClassEnrollment) -> str:
        """Colored seat badge: green with room to spare, yellow full, red over."""
        if row.is_over_capacity:
            return f"{cls.BG_RED}{cls.WHITE} OVER {cls.RESET}"
        if row.vacancies == 0:
            return f"{cls.BG_YELLOW}{cls.WHITE} FULL {cls.RESET}"
        return f"{cls.BG_GREEN}{cls.WHITE} OPEN {cls.RESET}"

    @classmethod
    def name_color(cls, student: Student) -> str:
        """Staff children in magenta, children with medical flags in red."""
        if student.is_staff_child:
            return cls.MAGENTA
        if student.has_medical_flags:
            return cls.RED
        return cls.WHITE

    @classmethod
    def print_enrollment_summary(cls, projection_date: str, totals: EnrollmentTotals,
                                 rows: list):
        """Print facility totals followed by one line per active classroom."""
        cls.print_header(f"ENROLLMENT AS OF {projection_date}")

        print(f"\n  {cls.BOLD}Enrolled:{cls.RESET} {totals.enrolled} / {totals.capacity}"
              f"  {cls.DIM}({totals.utilization:.0%} utilized){cls.RESET}")
        print(f"  {cls.BOLD}Vacancies:{cls.RESET} {totals.vacancies}")
        print(f"  {cls.BOLD}Total FTE:{cls.RESET} {totals.total_fte:.2f}")

        print(f"\n  {cls.BOLD}{'CLASSROOM':<28} {'SEATS':<10} {'WAITLIST':<10} {'STATUS'}{cls.RESET}")
        print(f"  {cls.DIM}{'-' * 60}{cls.RESET}")
        for row in rows:
            seats = f"{row.enrolled}/{row.capacity}"
            waitlist = str(row.waitlisted) if row.waitlisted else "-"
            print(f"  {row.name:<28} {seats:<10} {waitlist:<10} {cls.capacity_badge(row)}")

    @classmethod
    def print_class_roster(cls, row: ClassEnrollment, entries: list,
                           settings: DisplaySettings):
        """
        Print one classroom card.

        Args:
            row: Seat usage for the room
            entries: List of (Student, age_label, transition_text) tuples
            settings: Which optional columns to show
        """
        cls.print_subheader(f"{row.name} ({row.enrolled}/{row.capacity})")
        if not entries:
            print(f"    {cls.DIM}(no students){cls.RESET}")
            return

        for student, age_label, transition_text in entries:
            line = f"    {cls.name_color(student)}{student.name}{cls.RESET}"
            extras = []
            if settings.show_dob:
                extras.append(f"DOB {student.dob}")
            if settings.show_age:
                extras.append(age_label)
            if settings.show_transition and transition_text:
                extras.append(f"moves {transition_text}")
            if extras:
                line += f"  {cls.DIM}{' · '.join(extras)}{cls.RESET}"
            print(line)

    @classmethod
    def _print_expiring(cls, item: ExpiringItem, color: str):
        print(f"    {color}{item.days_left:>3}d{cls.RESET}  {item.student_name:<24} "
              f"{item.item_name} {cls.DIM}({item.item_type.value}, exp {item.date}){cls.RESET}")

    @classmethod
    def print_expiration_report(cls, report: ExpirationReport):
        """Print urgent and upcoming medical expirations."""
        cls.print_header(f"MEDICAL ALERTS ({report.total})")

        cls.print_subheader(f"Urgent ({len(report.urgent)})")
        if not report.urgent:
            print(f"    {cls.DIM}Zero urgent expirations detected.{cls.RESET}")
        for item in report.urgent:
            cls._print_expiring(item, cls.RED)

        cls.print_subheader(f"Upcoming ({len(report.upcoming)})")
        if not report.upcoming:
            print(f"    {cls.DIM}No upcoming expirations found.{cls.RESET}")
        for item in report.upcoming:
            cls._print_expiring(item, cls.YELLOW)

    @classmethod
    def print_relationship_group(cls, student: Student, group: list, classes: dict):
        """Print everyone linked to a student, with their current room."""
        cls.print_subheader(f"Linked to {student.name}")
        if not group:
            print(f"    {cls.DIM}(no siblings or friends on file){cls.RESET}")
            return
        for other in group:
            print(f"    {other.name:<24} {cls.DIM}{classes.get(other.id, '?')}{cls.RESET}")
