"""Bundled English strings, keyed by component then identifier."""

STRINGS: dict[str, dict[str, str]] = {
    "core": {
        "cancel": "Cancel",
        "cost": "Cost",
        "course": "Course",
        "currency": "Currency",
        "date": "Date",
        "name": "Name",
        "no": "No",
        "ok": "OK",
        "plugin": "Plugin",
        "status": "Status",
        "success": "Success",
        "unfinished": "Unfinished",
        "yes": "Yes",
    },
    "core_langconfig": {
        "strftimedatetimeshortaccurate": "%d/%m/%y, %H:%M:%S",
    },
    "plugin": {
        "type_paygw": "Payment gateway",
    },
    "report_payments": {
        "awaitingpassword": "Awaiting password",
        "cost": "Cost",
        "name": "Account name",
        "paymentid": "Payment ID",
        "payments": "Payments",
        "pluginname": "Payments",
        "privacy:metadata": "The payments report plugin does not store any personal data.",
        "recurrent": "Recurrent",
    },
}
