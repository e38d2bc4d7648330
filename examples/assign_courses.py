"""Assign courses to instructors by preference and teaching load."""
from __future__ import annotations

from flowassign import Instructor, assign_courses


def main() -> None:
    courses = ["CS101", "CS201", "CS301", "CS350", "CS420"]
    instructors = [
        Instructor("Hopper", ["CS101", "CS301"], 1),
        Instructor("Knuth", ["CS201", "CS301", "CS420"], 2),
        Instructor("Liskov", ["CS101", "CS350"], 2),
    ]
    for instructor in assign_courses(instructors, courses):
        assigned = ", ".join(instructor.assigned_courses) or "-"
        print(f"{instructor.last_name} (max {instructor.max_courses}): {assigned}")


if __name__ == "__main__":
    main()
