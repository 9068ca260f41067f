import streamlit as st
import requests
import os

# --- Configuration ---
API_BASE_URL = os.getenv("API_BASE_URL", "http://localhost:5001/api/v1")
REQUEST_TIMEOUT_S = float(os.getenv("API_TIMEOUT_S", "30"))

DISPLAY_MODES = ["heuristic", "pretty"]
# Dialects offered for the sqlglot-based pretty display
SQL_DIALECTS = ["mysql", "postgres", "oracle", "sqlite", "tsql"]

SAMPLE_MYBATIS_LOG = """==>  Preparing: SELECT id, name, status FROM users WHERE id = ? AND name = ? AND active = ?
==> Parameters: 1(Integer), John(String), true(Boolean)
<==      Total: 1
==>  Preparing: INSERT INTO audit_log (user_id, action, note) VALUES (?, ?, ?)
==> Parameters: 1(Long), login(String), It\\'s me(String)
<==    Updates: 1"""


# --- API Call Functions ---

def api_post_request(endpoint, payload):
    """Helper function to make POST requests to the API."""
    try:
        response = requests.post(f"{API_BASE_URL}/{endpoint}", json=payload, timeout=REQUEST_TIMEOUT_S)
        response.raise_for_status()  # Raise an exception for HTTP errors (4xx or 5xx)
        return response.json()
    except requests.exceptions.HTTPError as http_err:
        st.error(f"HTTP error occurred: {http_err} - Response: {response.text}")
        try:
            return response.json() # Try to return JSON error details if possible
        except ValueError:
            return {"error": response.text, "status_code": response.status_code}
    except requests.exceptions.RequestException as req_err:
        st.error(f"Request error occurred: {req_err}")
        return {"error": str(req_err)}
    except ValueError as json_err: # Handle cases where response is not JSON
        st.error(f"JSON decode error: {json_err} - Response: {response.text}")
        return {"error": "Failed to decode JSON response", "raw_response": response.text}

def api_get_request(endpoint, params=None):
    """Helper function to make GET requests to the API."""
    try:
        response = requests.get(f"{API_BASE_URL}/{endpoint}", params=params, timeout=REQUEST_TIMEOUT_S)
        response.raise_for_status()
        return response.json()
    except requests.exceptions.HTTPError as http_err:
        st.error(f"HTTP error occurred: {http_err} - Response: {response.text}")
        try:
            return response.json()
        except ValueError:
            return {"error": response.text, "status_code": response.status_code}
    except requests.exceptions.RequestException as req_err:
        st.error(f"Request error occurred: {req_err}")
        return {"error": str(req_err)}
    except ValueError as json_err:
        st.error(f"JSON decode error: {json_err} - Response: {response.text}")
        return {"error": "Failed to decode JSON response", "raw_response": response.text}


def mybatis_convert_api(log_text, display_mode=None, dialect=None):
    """Calls the /mybatis/convert endpoint."""
    payload = {"log_text": log_text}
    if display_mode:
        payload["display_mode"] = display_mode
    if dialect:
        payload["dialect"] = dialect
    return api_post_request("mybatis/convert", payload)

def list_tools_api():
    """Calls the /tools endpoint; returns an empty list when the API is unreachable."""
    tools = api_get_request("tools")
    return tools if isinstance(tools, list) else []
