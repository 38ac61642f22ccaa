"""Bulk policy import template offered on the agent dashboard."""

TEMPLATE_FILENAME = "customer_import_template.csv"

TEMPLATE_HEADER = [
    "First Name", "Last Name", "Email", "Phone", "Address",
    "Policy Type", "Premium Amount", "Tenure", "Start Date",
]

TEMPLATE_ROWS = [
    "John,Doe,john.doe@email.com,(555) 123-4567,123 Main St City State 12345,Life,25000,10,2024-01-15",
    "Jane,Smith,jane.smith@email.com,(555) 987-6543,456 Oak Ave City State 67890,Health,15000,5,2024-02-20",
    "Robert,Johnson,robert.j@email.com,(555) 456-7890,789 Pine Rd City State 11111,Auto,8000,3,2024-03-10",
]


def template_csv() -> str:
    """Return the template text. It is a download only and is never parsed back."""
    return "\n".join([",".join(TEMPLATE_HEADER), *TEMPLATE_ROWS])
