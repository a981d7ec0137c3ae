default_settings = {
    "CALENDAR": "solar",
    "DAILY_NOTES_FOLDER": "",
    "DAILY_NOTES_FORMAT": "YYYY-MM-DD",
    "WEEKLY_NOTES_FOLDER": "",
    "WEEKLY_NOTES_FORMAT": "YYYY-[W]WW",
    "MONTHLY_NOTES_FOLDER": "",
    "MONTHLY_NOTES_FORMAT": "YYYY-MM",
    "QUARTERLY_NOTES_FOLDER": "",
    "QUARTERLY_NOTES_FORMAT": "YYYY-[Q]Q",
    "YEARLY_NOTES_FOLDER": "",
    "YEARLY_NOTES_FORMAT": "YYYY",
    "ENABLE_QUARTERLY_NOTES": True,
    "PERSIAN_DIGITS": False,
    "DIALECT": "persian-modern",
}

# Keys of the host application's settings record.
record_keys = {
    "dateFormat": "CALENDAR",
    "dailyNotesFolderPath": "DAILY_NOTES_FOLDER",
    "dailyNotesFormat": "DAILY_NOTES_FORMAT",
    "weeklyNotesFolderPath": "WEEKLY_NOTES_FOLDER",
    "weeklyNotesFormat": "WEEKLY_NOTES_FORMAT",
    "monthlyNotesFolderPath": "MONTHLY_NOTES_FOLDER",
    "monthlyNotesFormat": "MONTHLY_NOTES_FORMAT",
    "quarterlyNotesFolderPath": "QUARTERLY_NOTES_FOLDER",
    "quarterlyNotesFormat": "QUARTERLY_NOTES_FORMAT",
    "yearlyNotesFolderPath": "YEARLY_NOTES_FOLDER",
    "yearlyNotesFormat": "YEARLY_NOTES_FORMAT",
    "enableQuarterlyNotes": "ENABLE_QUARTERLY_NOTES",
}
