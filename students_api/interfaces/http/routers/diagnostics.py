from fastapi import APIRouter, Request, Response

router = APIRouter(prefix="/test", tags=["diagnostics"])


@router.get("/headers")
def echo_headers(request: Request):
    return {"message": "Here are your request headers", "headers": dict(request.headers)}


@router.get("/set-cookie")
def set_demo_cookie(response: Response):
    response.set_cookie("demoCookie", "hello-from-server", httponly=True, samesite="lax")
    return {"message": "demoCookie set. Check 'Cookies' in Postman."}


@router.get("/get-cookies")
def get_cookies(request: Request):
    return {"cookies": dict(request.cookies)}
