# Log the traceback of every FormkitException at construction time.
DEBUG_APP_EXCEPTION = False
