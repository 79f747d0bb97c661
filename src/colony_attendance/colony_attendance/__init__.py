"""Colony Attendance package.

Organized by feature modules (periods, students, attendance, reports) with a
thin Flask controller layer over service/repository layers. The report engine
in ``reports`` is pure: it only consumes what the repositories return.
"""
