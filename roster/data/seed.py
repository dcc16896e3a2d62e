"""
Static seed roster: fifty deterministic personnel records.

The working set is never persisted; every run rebuilds it from this seed.
Skills, legacy function, location and legacy status rotate through fixed
cycles so that filters over any of them produce predictable partitions.
"""

from __future__ import annotations

from typing import List, Tuple

from roster.domain.models import PersonnelRecord

SKILLS = [
    "Power BI",
    "Strategic Sourcing",
    "Contract Management",
    "SAP",
    "Project Management",
    "Spend Analysis",
]

LOCATIONS = ["India – Mumbai", "India – Hyderabad", "India – Coimbatore"]
FUNCTIONS = ["Consulting", "KS", "P-ops"]

# (name, skill, legacy status); code, function and location follow the row index.
_ROWS: List[Tuple[str, str, str]] = [
    ("Aditya Sharma", "Power BI", "Allocated"),
    ("Priya Patel", "SAP", "Bench-shadow"),
    ("Rajesh Kumar", "Strategic Sourcing", "Billable"),
    ("Sneha Gupta", "Spend Analysis", "Bench-unassigned"),
    ("Vikram Singh", "Contract Management", "Bench-support"),
    ("Neha Reddy", "Project Management", "Allocated"),
    ("Arjun Nair", "Power BI", "Billable"),
    ("Divya Krishnan", "Contract Management", "Bench-shadow"),
    ("Karthik Menon", "SAP", "Bench-support"),
    ("Ananya Desai", "Spend Analysis", "Bench-unassigned"),
    ("Ravi Verma", "Power BI", "Allocated"),
    ("Meera Iyer", "Strategic Sourcing", "Billable"),
    ("Suresh Rao", "Project Management", "Bench-shadow"),
    ("Kavita Mehta", "SAP", "Bench-support"),
    ("Prakash Joshi", "Spend Analysis", "Bench-unassigned"),
    ("Lakshmi Narayan", "Contract Management", "Allocated"),
    ("Venkat Raman", "Power BI", "Billable"),
    ("Deepa Pillai", "Strategic Sourcing", "Bench-shadow"),
    ("Rahul Malhotra", "Project Management", "Bench-support"),
    ("Jyoti Saxena", "SAP", "Bench-unassigned"),
    ("Manoj Kumar", "Spend Analysis", "Allocated"),
    ("Shalini Chopra", "Contract Management", "Billable"),
    ("Gopal Iyengar", "Power BI", "Bench-shadow"),
    ("Nandini Sharma", "Strategic Sourcing", "Bench-support"),
    ("Amit Kapoor", "Project Management", "Bench-unassigned"),
    ("Sunita Bose", "SAP", "Allocated"),
    ("Vijay Menon", "Spend Analysis", "Billable"),
    ("Pooja Rathore", "Contract Management", "Bench-shadow"),
    ("Sanjay Khanna", "Power BI", "Bench-support"),
    ("Anjali Mathur", "Strategic Sourcing", "Bench-unassigned"),
    ("Girish Agarwal", "Project Management", "Allocated"),
    ("Radha Krishnan", "SAP", "Billable"),
    ("Mohan Das", "Spend Analysis", "Bench-shadow"),
    ("Leela Chandra", "Contract Management", "Bench-support"),
    ("Dinesh Prabhu", "Power BI", "Bench-unassigned"),
    ("Usha Rani", "Strategic Sourcing", "Allocated"),
    ("Ashok Mishra", "Project Management", "Billable"),
    ("Sangeetha Nair", "SAP", "Bench-shadow"),
    ("Rakesh Tiwari", "Spend Analysis", "Bench-support"),
    ("Geeta Banerjee", "Contract Management", "Bench-unassigned"),
    ("Rajiv Chadha", "Power BI", "Allocated"),
    ("Shobha Rao", "Strategic Sourcing", "Billable"),
    ("Naveen Reddy", "Project Management", "Bench-shadow"),
    ("Asha Mirza", "SAP", "Bench-support"),
    ("Kishore Nayak", "Spend Analysis", "Bench-unassigned"),
    ("Vimala Krishnan", "Contract Management", "Allocated"),
    ("Harish Pillai", "Power BI", "Billable"),
    ("Sarika Jain", "Strategic Sourcing", "Bench-shadow"),
    ("Nitin Saxena", "Project Management", "Bench-support"),
    ("Latha Subramaniam", "SAP", "Bench-unassigned"),
]


def seed_records() -> List[PersonnelRecord]:
    """Build the fifty seed records, completed with the product defaults."""
    records: List[PersonnelRecord] = []
    for index, (name, skill, status) in enumerate(_ROWS):
        number = index + 1
        records.append(
            PersonnelRecord.with_defaults(
                {
                    "id": str(number),
                    "employeeCode": f"GEP{number:03d}",
                    "name": name,
                    "skillset": [skill],
                    "function": FUNCTIONS[index % len(FUNCTIONS)],
                    "location": LOCATIONS[index % len(LOCATIONS)],
                    "status": status,
                }
            )
        )
    return records


__all__ = ["SKILLS", "LOCATIONS", "FUNCTIONS", "seed_records"]
