import os


# Check solve_presorted preconditions before solving.
# The check costs a pass over the intervals so it is off unless requested.
if os.environ.get('WISP_STRICT'):
    WISP_STRICT = os.environ.get('WISP_STRICT').strip().lower() in ('1', 'true', 'yes', 'on')
else:
    WISP_STRICT = False
